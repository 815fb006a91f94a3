"""
Seed reference data: roles, demo users, categories and a few sample tools.
Idempotent: existing rows (matched by natural key) are left untouched.

  python -m app.scripts.seed
"""

import logging
import sys

from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.core.security import hash_password
from app.models import Category, Role, Tool, User
from app.services.slugs import slugify

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

ROLES = [
    ("owner", "Owner"),
    ("backend", "Backend Developer"),
    ("frontend", "Frontend Developer"),
    ("qa", "QA"),
    ("designer", "Designer"),
    ("project_manager", "Project Manager"),
]

USERS = [
    ("Ivan Ivanov", "ivan@admin.local", "owner"),
    ("Elena Petrova", "elena@frontend.local", "frontend"),
    ("Petar Georgiev", "petar@backend.local", "backend"),
]

CATEGORIES = [
    ("Development", "Development tools and IDEs"),
    ("Design", "Design and prototyping tools"),
    ("Project Management", "Project management and collaboration tools"),
    ("AI & Machine Learning", "AI and ML powered tools"),
    ("Testing & QA", "Testing and quality assurance tools"),
]

SAMPLE_TOOLS = [
    {
        "name": "ChatGPT",
        "link": "https://chat.openai.com",
        "description": "AI-powered conversational assistant for code, writing, and problem-solving",
        "official_documentation": "https://platform.openai.com/docs",
        "how_to_use": "Simply start a conversation and ask questions or request assistance with various tasks.",
        "tags": ["ai", "chatbot", "productivity"],
        "roles": ["backend", "frontend"],
    },
    {
        "name": "GitHub Copilot",
        "link": "https://github.com/features/copilot",
        "description": "AI pair programmer that suggests code completions",
        "official_documentation": "https://docs.github.com/copilot",
        "how_to_use": "Install the extension in your IDE and start coding. Copilot will suggest completions as you type.",
        "tags": ["ai", "coding", "ide"],
        "roles": ["backend", "frontend"],
    },
    {
        "name": "Midjourney",
        "link": "https://www.midjourney.com",
        "description": "AI art generator that creates images from text descriptions",
        "how_to_use": "Use Discord to interact with the Midjourney bot and generate images from text prompts.",
        "tags": ["ai", "design", "art"],
        "roles": ["designer"],
    },
]


def seed(db: Session) -> None:
    """Insert whatever reference rows are missing, then commit once."""
    roles: dict[str, Role] = {}
    for name, display_name in ROLES:
        role = db.query(Role).filter(Role.name == name).first()
        if role is None:
            role = Role(name=name, display_name=display_name, description=f"Role for {display_name}")
            db.add(role)
        roles[name] = role
    db.flush()

    users: dict[str, User] = {}
    for name, email, role_name in USERS:
        user = db.query(User).filter(User.email == email).first()
        if user is None:
            user = User(
                name=name,
                email=email,
                password_hash=hash_password(DEMO_PASSWORD),
                role_id=roles[role_name].id,
            )
            db.add(user)
        users[email] = user

    categories: dict[str, Category] = {}
    for name, description in CATEGORIES:
        slug = slugify(name)
        category = db.query(Category).filter(Category.slug == slug).first()
        if category is None:
            category = Category(name=name, slug=slug, description=description)
            db.add(category)
        categories[name] = category
    db.flush()

    owner = users["ivan@admin.local"]
    ai_category = categories["AI & Machine Learning"]
    for data in SAMPLE_TOOLS:
        if db.query(Tool.id).filter(Tool.name == data["name"]).first():
            continue
        tool = Tool(
            name=data["name"],
            link=data["link"],
            description=data["description"],
            official_documentation=data.get("official_documentation"),
            how_to_use=data.get("how_to_use"),
            tags=data.get("tags"),
            user_id=owner.id,
        )
        tool.categories = [ai_category]
        tool.recommended_for_roles = [roles[r] for r in data["roles"]]
        db.add(tool)

    db.commit()


def main() -> int:
    db = SessionLocal()
    try:
        seed(db)
        logger.info(
            "Seed completed: roles=%s users=%s categories=%s tools=%s",
            db.query(Role).count(),
            db.query(User).count(),
            db.query(Category).count(),
            db.query(Tool).count(),
        )
        return 0
    except Exception as e:
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
