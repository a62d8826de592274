"""Seed data for the blog associations schema.

Populates one author with two posts, a profile and three tags, with each
post carrying two of the tags:

    Leeroy Jenkins
    ├── profile: ljenk <ljenk@aol.com>
    ├── Web Development for Cats  [Internet, Cats]
    └── Web Development for Dogs  [Internet, Dogs]

Usage:
    $ alembic upgrade head
    $ python -m infrastructure.seeds
"""

import logging
from typing import Dict

from sqlalchemy.orm import Session

from infrastructure.models.author_orm import AuthorORM
from infrastructure.models.post_orm import PostORM
from infrastructure.models.post_tag_orm import PostTagORM
from infrastructure.models.profile_orm import ProfileORM
from infrastructure.models.tag_orm import TagORM

logger = logging.getLogger(__name__)


def seed_database(db_session: Session) -> Dict[str, int]:
    """Insert the sample rows unless the database already holds authors.

    Foreign keys are set explicitly from the parents' generated ids, the way a
    hand-written seed file would do it.

    Args:
        db_session (Session): Session bound to a migrated database.

    Returns:
        Dict[str, int]: Number of rows inserted per table (all zero when skipped).
    """
    counts = {"authors": 0, "posts": 0, "profiles": 0, "tags": 0, "post_tags": 0}

    if db_session.query(AuthorORM).count() > 0:
        logger.info("Authors already present, skipping seed")
        return counts

    try:
        a1 = AuthorORM(name="Leeroy Jenkins")
        db_session.add(a1)
        db_session.flush()

        p1 = PostORM(author_id=a1.id, title="Web Development for Cats")
        p2 = PostORM(author_id=a1.id, title="Web Development for Dogs")
        db_session.add_all([p1, p2])

        db_session.add(
            ProfileORM(
                author_id=a1.id,
                username="ljenk",
                email="ljenk@aol.com",
                bio="a very dated reference",
            )
        )

        t1 = TagORM(name="Internet")
        t2 = TagORM(name="Cats")
        t3 = TagORM(name="Dogs")
        db_session.add_all([t1, t2, t3])
        db_session.flush()

        db_session.add_all(
            [
                PostTagORM(post_id=p1.id, tag_id=t1.id),
                PostTagORM(post_id=p1.id, tag_id=t2.id),
                PostTagORM(post_id=p2.id, tag_id=t1.id),
                PostTagORM(post_id=p2.id, tag_id=t3.id),
            ]
        )
        db_session.commit()

    except Exception as e:
        db_session.rollback()
        logger.error(f"Seeding failed: {str(e)}")
        raise

    counts.update(authors=1, posts=2, profiles=1, tags=3, post_tags=4)
    logger.info(f"Seeded database: {counts}")
    return counts


def main() -> None:
    from utils.dependencies import SessionLocal

    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
