import pytest

from domain.entities.author import AuthorEntity
from domain.entities.post import PostEntity
from domain.entities.post_tag import PostTagEntity
from domain.entities.profile import ProfileEntity
from domain.entities.tag import TagEntity


def test_tag_name_is_stripped():
    tag = TagEntity(id=None, name="  Cats ")
    assert tag.name == "Cats"
    assert tag.is_new()


@pytest.mark.parametrize("name", ["", "   "])
def test_tag_rejects_blank_name(name):
    with pytest.raises(ValueError):
        TagEntity(id=None, name=name)


def test_tag_with_id_keeps_name():
    persisted = TagEntity(id=None, name="Dogs").with_id(3)
    assert persisted == TagEntity(id=3, name="Dogs")
    assert not persisted.is_new()


def test_author_rejects_blank_name():
    with pytest.raises(ValueError):
        AuthorEntity(id=None, name=" ")


def test_post_requires_author():
    with pytest.raises(ValueError, match="author"):
        PostEntity(id=None, title="Orphan", author_id=None)


def test_post_title_stripped_and_content_optional():
    post = PostEntity(id=None, title=" Web Development for Cats ", author_id=1)
    assert post.title == "Web Development for Cats"
    assert post.content is None
    assert post.with_id(5).id == 5
    assert post.with_id(5).author_id == 1


def test_profile_requires_author():
    with pytest.raises(ValueError):
        ProfileEntity(id=None, author_id=None, username="ljenk")


def test_post_tag_requires_both_keys():
    with pytest.raises(ValueError):
        PostTagEntity(id=None, post_id=1, tag_id=None)
    assert PostTagEntity(id=None, post_id=1, tag_id=2).with_id(9).id == 9


def test_entities_are_immutable():
    author = AuthorEntity(id=1, name="Leeroy Jenkins")
    with pytest.raises(AttributeError):
        author.name = "Someone Else"
