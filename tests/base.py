"""Shared fixtures: a fresh in-memory database per test and factories for rows."""

import unittest
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.core.security import create_access_token, hash_password
from app.main import app
from app.models import Base, Category, Role, Tool, User
from app.services.slugs import slugify

API = "/api"
DEFAULT_PASSWORD = "password"
BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


class ApiTestCase(unittest.TestCase):
    """TestClient against an isolated SQLite database with get_db overridden."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine, autoflush=False)

        def override_get_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)
        self._tool_seq = 0

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def _add(self, obj) -> int:
        with self.Session() as db:
            db.add(obj)
            db.commit()
            return obj.id

    def make_role(self, name: str = "backend", display_name: str = "Backend Developer") -> int:
        return self._add(Role(name=name, display_name=display_name))

    def make_user(
        self,
        email: str = "ivan@admin.local",
        name: str = "Ivan Ivanov",
        password: str = DEFAULT_PASSWORD,
        role_id: int | None = None,
    ) -> int:
        return self._add(
            User(
                email=email,
                name=name,
                password_hash=hash_password(password),
                role_id=role_id,
            )
        )

    def make_category(self, name: str, description: str | None = None) -> int:
        return self._add(Category(name=name, slug=slugify(name), description=description))

    def make_tool(
        self,
        owner_id: int | None,
        name: str,
        category_ids: list[int],
        role_ids: list[int] | None = None,
        description: str = "A useful tool",
        tags: list[str] | None = None,
        created_at: datetime | None = None,
    ) -> int:
        """Insert a tool directly; created_at defaults to a strictly increasing clock."""
        self._tool_seq += 1
        with self.Session() as db:
            tool = Tool(
                name=name,
                link=f"https://example.com/{slugify(name)}",
                description=description,
                tags=tags,
                user_id=owner_id,
                created_at=created_at or BASE_TIME + timedelta(minutes=self._tool_seq),
            )
            tool.categories = db.query(Category).filter(Category.id.in_(category_ids)).all()
            if role_ids:
                tool.recommended_for_roles = db.query(Role).filter(Role.id.in_(role_ids)).all()
            db.add(tool)
            db.commit()
            return tool.id

    def auth(self, user_id: int) -> dict[str, str]:
        """Authorization header with a freshly issued token for user_id."""
        return {"Authorization": f"Bearer {create_access_token(sub=user_id)}"}
