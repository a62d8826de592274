import pytest
from sqlalchemy.exc import IntegrityError

from domain.entities.post import PostEntity
from domain.entities.post_tag import PostTagEntity
from domain.entities.profile import ProfileEntity
from infrastructure.models.author_orm import AuthorORM
from infrastructure.models.post_orm import PostORM
from infrastructure.models.post_tag_orm import PostTagORM
from infrastructure.repositories.sqlalchemy_author_repository import (
    SqlAlchemyAuthorRepository,
)
from infrastructure.repositories.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from infrastructure.repositories.sqlalchemy_post_tag_repository import (
    SqlAlchemyPostTagRepository,
)
from infrastructure.repositories.sqlalchemy_profile_repository import (
    SqlAlchemyProfileRepository,
)
from infrastructure.repositories.sqlalchemy_tag_repository import (
    SqlAlchemyTagRepository,
)

authors = SqlAlchemyAuthorRepository()
posts = SqlAlchemyPostRepository()
profiles = SqlAlchemyProfileRepository()
tags = SqlAlchemyTagRepository()
post_tags = SqlAlchemyPostTagRepository()


async def test_every_post_has_exactly_one_author(seeded_session):
    for post in await posts.get_all(seeded_session):
        author = await authors.get_by_id(seeded_session, post.author_id)
        assert author is not None
        assert author.name == "Leeroy Jenkins"


async def test_author_posts_match_foreign_key(seeded_session):
    author = (await authors.get_all(seeded_session))[0]

    children = await posts.get_by_author_id(seeded_session, author.id)

    by_fk = (
        seeded_session.query(PostORM).filter(PostORM.author_id == author.id).all()
    )
    assert {post.id for post in children} == {row.id for row in by_fk}
    assert [post.title for post in children] == [
        "Web Development for Cats",
        "Web Development for Dogs",
    ]


async def test_author_without_posts_has_empty_collection(db_session):
    db_session.add(AuthorORM(name="Quiet Author"))
    db_session.commit()
    author = (await authors.get_all(db_session))[0]

    assert await posts.get_by_author_id(db_session, author.id) == []
    assert await profiles.get_by_author_id(db_session, author.id) is None


async def test_profile_lookup_by_author(seeded_session):
    profile = await profiles.get_by_author_id(seeded_session, 1)

    assert profile.username == "ljenk"
    assert profile.email == "ljenk@aol.com"
    assert profile.bio == "a very dated reference"
    assert profile.avatar_url is None
    assert profile.author_id == 1


async def test_post_tags_expand_through_join_table(seeded_session):
    cats_post = await tags.get_by_post_id(seeded_session, 1)
    dogs_post = await tags.get_by_post_id(seeded_session, 2)

    assert [tag.name for tag in cats_post] == ["Internet", "Cats"]
    assert [tag.name for tag in dogs_post] == ["Internet", "Dogs"]


async def test_tag_posts_expand_through_join_table(seeded_session):
    internet = await tags.get_by_name(seeded_session, "internet")
    dogs = await tags.get_by_name(seeded_session, "Dogs")

    internet_posts = await posts.get_by_tag_id(seeded_session, internet.id)
    dogs_posts = await posts.get_by_tag_id(seeded_session, dogs.id)

    assert [post.id for post in internet_posts] == [1, 2]
    assert [post.id for post in dogs_posts] == [2]


async def test_join_expansion_matches_post_tag_rows(seeded_session):
    rows = seeded_session.query(PostTagORM).filter(PostTagORM.post_id == 1).all()
    expanded = await tags.get_by_post_id(seeded_session, 1)

    assert {row.tag_id for row in rows} == {tag.id for tag in expanded}


async def test_inserted_join_row_shows_up_both_ways(seeded_session):
    await post_tags.save(seeded_session, PostTagEntity(id=None, post_id=1, tag_id=3))

    assert 3 in [tag.id for tag in await tags.get_by_post_id(seeded_session, 1)]
    assert 1 in [post.id for post in await posts.get_by_tag_id(seeded_session, 3)]


async def test_duplicate_join_rows_do_not_duplicate_expansion(seeded_session):
    # The schema has no composite unique constraint, so a second row is accepted
    await post_tags.save(seeded_session, PostTagEntity(id=None, post_id=1, tag_id=2))

    assert seeded_session.query(PostTagORM).filter_by(post_id=1).count() == 3
    assert [tag.name for tag in await tags.get_by_post_id(seeded_session, 1)] == [
        "Internet",
        "Cats",
    ]
    first = await post_tags.get_by_pair(seeded_session, 1, 2)
    assert first.id == 2


async def test_post_with_missing_author_is_rejected(db_session):
    with pytest.raises(IntegrityError):
        await posts.save(db_session, PostEntity(id=None, title="Orphan", author_id=999))

    assert await posts.get_all(db_session) == []


async def test_profile_with_missing_author_is_rejected(db_session):
    with pytest.raises(IntegrityError):
        await profiles.save(db_session, ProfileEntity(id=None, author_id=42))


async def test_join_row_with_missing_tag_is_rejected(seeded_session):
    with pytest.raises(IntegrityError):
        await post_tags.save(
            seeded_session, PostTagEntity(id=None, post_id=1, tag_id=99)
        )


def test_null_author_id_rejected_by_schema(db_session):
    db_session.add(PostORM(title="No author"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_orm_relationships_follow_foreign_keys(seeded_session):
    author = seeded_session.query(AuthorORM).one()

    assert [post.title for post in author.posts] == [
        "Web Development for Cats",
        "Web Development for Dogs",
    ]
    assert author.profile.username == "ljenk"
    assert author.posts[0].author is author
    assert [tag.name for tag in author.posts[1].tags] == ["Internet", "Dogs"]
    assert [post.id for post in author.posts[0].tags[0].posts] == [1, 2]


def test_appending_to_author_posts_fills_foreign_key(seeded_session):
    author = seeded_session.query(AuthorORM).one()

    post = PostORM(title="Web Development for Birds")
    author.posts.append(post)
    seeded_session.commit()

    assert post.author_id == author.id
