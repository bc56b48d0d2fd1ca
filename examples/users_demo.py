#!/usr/bin/env python3
"""Demonstration of a table definition backed by SQLite."""

from pydantic import BaseModel

from tablekit import (
    Column,
    ColumnKey,
    DatabaseConnection,
    OrderSpec,
    SortOrder,
    SQLType,
    Table,
    create_connection,
    get_logger,
    settings,
    setup_logging,
)


class User(BaseModel):
    """User model hydrated from the users table."""

    id: int | None = None
    first_name: str = ""
    email: str = ""


class UsersTable(Table[User]):
    """The users table."""

    def __init__(self, connection: DatabaseConnection) -> None:
        super().__init__(
            connection,
            "users",
            [
                Column(
                    "id",
                    SQLType.INT,
                    key=ColumnKey.PRIMARY_KEY,
                    extra="AUTO_INCREMENT",
                ),
                Column("first_name", SQLType.VARCHAR, length=100),
                Column("email", SQLType.VARCHAR, length=255),
            ],
            model=User,
        )

    def find_by_email(self, email: str) -> list[User]:
        condition = self.condition("email", email, like=True)
        return self.read(where=[condition], as_list=True)


def main() -> None:
    """Demonstrate the table engine."""
    setup_logging(level=settings.log_level)
    logger = get_logger(__name__)

    with create_connection(settings) as connection:
        users = UsersTable(connection)
        users.create()

        ann_id = users.insert(User(first_name="Ann", email="ann@example.com"))
        users.insert(User(first_name="Bob", email="bob@example.com"))
        logger.info(f"Inserted Ann with id {ann_id}, table has {users.count()} rows")

        ann = users.read(where=[users.condition("id", ann_id)])
        ann.email = "ann@example.org"
        users.update(ann)
        logger.info(f"Found by email: {users.find_by_email('example.org')}")

        by_name = OrderSpec(users.selection("first_name"), SortOrder.DESC)
        ordered = users.read(order=[by_name])
        logger.info(f"Users by name, descending: {ordered}")

        users.delete([users.condition("id", ann_id)])
        logger.info(f"After delete: {users.count()} rows")
        users.drop()


if __name__ == "__main__":
    main()
