import pytest

from domain.services.author_service import (
    AuthorNotFoundError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
)
from domain.services.post_service import PostNotFoundError
from domain.services.tag_service import TagAlreadyExistsError, TagNotFoundError
from utils.dependencies import (
    get_author_service,
    get_post_service,
    get_profile_service,
    get_tag_service,
)


@pytest.fixture
def author_service():
    return get_author_service()


@pytest.fixture
def post_service():
    return get_post_service()


@pytest.fixture
def profile_service():
    return get_profile_service()


@pytest.fixture
def tag_service():
    return get_tag_service()


async def test_create_post_for_author_fills_author_id(seeded_session, author_service):
    post = await author_service.create_post_for_author(
        seeded_session, 1, "Web Development for Birds", "Tweet tweet"
    )

    assert post.id is not None
    assert post.author_id == 1
    assert post in await author_service.get_author_posts(seeded_session, 1)


async def test_create_post_for_unknown_author(db_session, author_service):
    with pytest.raises(AuthorNotFoundError):
        await author_service.create_post_for_author(db_session, 7, "Lost post")


async def test_get_posts_of_unknown_author(db_session, author_service):
    with pytest.raises(AuthorNotFoundError):
        await author_service.get_author_posts(db_session, 7)


async def test_new_author_starts_without_children(db_session, author_service):
    author = await author_service.create_author(db_session, "  Grace Hopper ")

    assert author.name == "Grace Hopper"
    assert await author_service.get_author_posts(db_session, author.id) == []
    with pytest.raises(ProfileNotFoundError):
        await author_service.get_author_profile(db_session, author.id)


async def test_author_has_at_most_one_profile(seeded_session, author_service):
    with pytest.raises(ProfileAlreadyExistsError):
        await author_service.create_profile_for_author(
            seeded_session, 1, username="second"
        )

    profile = await author_service.get_author_profile(seeded_session, 1)
    assert profile.username == "ljenk"


async def test_create_profile_fills_author_id(db_session, author_service):
    author = await author_service.create_author(db_session, "Ada Lovelace")

    profile = await author_service.create_profile_for_author(
        db_session, author.id, username="ada", facebook="ada.lovelace"
    )

    assert profile.author_id == author.id
    assert profile.facebook == "ada.lovelace"
    assert await author_service.get_author_profile(db_session, author.id) == profile


async def test_post_author_is_parent(seeded_session, post_service):
    author = await post_service.get_post_author(seeded_session, 2)
    assert author.id == 1


async def test_post_author_for_unknown_post(seeded_session, post_service):
    with pytest.raises(PostNotFoundError):
        await post_service.get_post_author(seeded_session, 99)


async def test_profile_of_unknown_author(db_session, author_service):
    with pytest.raises(AuthorNotFoundError):
        await author_service.get_author_profile(db_session, 7)


async def test_post_with_missing_author(orphan_rows, seeded_session, post_service):
    post_id = orphan_rows["post_id"]

    with pytest.raises(AuthorNotFoundError, match=f"of post {post_id}"):
        await post_service.get_post_author(seeded_session, post_id)


async def test_profile_with_missing_author(
    orphan_rows, seeded_session, profile_service
):
    profile_id = orphan_rows["profile_id"]

    with pytest.raises(AuthorNotFoundError, match=f"of profile {profile_id}"):
        await profile_service.get_profile_author(seeded_session, profile_id)


async def test_profile_author_is_parent(seeded_session, profile_service):
    author = await profile_service.get_profile_author(seeded_session, 1)
    assert author.name == "Leeroy Jenkins"

    with pytest.raises(ProfileNotFoundError):
        await profile_service.get_profile_author(seeded_session, 2)


async def test_tag_post_round_trip(seeded_session, post_service, tag_service):
    link, created = await post_service.tag_post(seeded_session, 1, 3)

    assert created
    assert (link.post_id, link.tag_id) == (1, 3)
    assert 3 in [tag.id for tag in await post_service.get_post_tags(seeded_session, 1)]
    assert 1 in [post.id for post in await tag_service.get_tag_posts(seeded_session, 3)]


async def test_tag_post_is_idempotent(seeded_session, post_service):
    first, first_created = await post_service.tag_post(seeded_session, 2, 2)
    second, second_created = await post_service.tag_post(seeded_session, 2, 2)

    assert first == second
    assert (first_created, second_created) == (True, False)
    tags = await post_service.get_post_tags(seeded_session, 2)
    assert [tag.name for tag in tags] == ["Internet", "Cats", "Dogs"]


async def test_tag_post_returns_existing_seed_row(seeded_session, post_service):
    link, created = await post_service.tag_post(seeded_session, 1, 1)
    assert link.id == 1
    assert not created


async def test_tag_post_unknown_tag_or_post(seeded_session, post_service):
    with pytest.raises(TagNotFoundError):
        await post_service.tag_post(seeded_session, 1, 99)
    with pytest.raises(PostNotFoundError):
        await post_service.tag_post(seeded_session, 99, 1)


async def test_tags_sorted_by_name(seeded_session, tag_service):
    tags = await tag_service.get_all_tags(seeded_session)
    assert [tag.name for tag in tags] == ["Cats", "Dogs", "Internet"]


async def test_duplicate_tag_names_are_rejected(seeded_session, tag_service):
    with pytest.raises(TagAlreadyExistsError):
        await tag_service.create_tag(seeded_session, " cats ")


async def test_blank_tag_name_is_rejected(seeded_session, tag_service):
    with pytest.raises(ValueError):
        await tag_service.create_tag(seeded_session, "   ")


async def test_new_tag_has_no_posts(seeded_session, tag_service):
    tag = await tag_service.create_tag(seeded_session, "Birds")

    assert await tag_service.get_tag_posts(seeded_session, tag.id) == []
    with pytest.raises(TagNotFoundError):
        await tag_service.get_tag_posts(seeded_session, 99)
