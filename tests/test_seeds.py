from infrastructure.models.author_orm import AuthorORM
from infrastructure.models.post_tag_orm import PostTagORM
from infrastructure.models.tag_orm import TagORM
from infrastructure.seeds import seed_database


def test_seed_inserts_sample_rows(db_session):
    counts = seed_database(db_session)

    assert counts == {
        "authors": 1,
        "posts": 2,
        "profiles": 1,
        "tags": 3,
        "post_tags": 4,
    }
    author = db_session.query(AuthorORM).one()
    assert author.name == "Leeroy Jenkins"
    assert author.profile.bio == "a very dated reference"
    assert [tag.name for tag in db_session.query(TagORM).order_by(TagORM.id)] == [
        "Internet",
        "Cats",
        "Dogs",
    ]


def test_seed_links_each_post_to_two_tags(db_session):
    seed_database(db_session)

    pairs = {
        (row.post.title, row.tag.name) for row in db_session.query(PostTagORM).all()
    }
    assert pairs == {
        ("Web Development for Cats", "Internet"),
        ("Web Development for Cats", "Cats"),
        ("Web Development for Dogs", "Internet"),
        ("Web Development for Dogs", "Dogs"),
    }


def test_seed_is_skipped_when_authors_exist(seeded_session):
    counts = seed_database(seeded_session)

    assert set(counts.values()) == {0}
    assert seeded_session.query(AuthorORM).count() == 1
    assert seeded_session.query(PostTagORM).count() == 4
