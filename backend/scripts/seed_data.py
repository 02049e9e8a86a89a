"""Seed the database with sample users, projects and comments for local development."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from projecthub.database import SessionLocal, engine, Base
import projecthub.models  # noqa: F401

from projecthub.models.comment import Comment
from projecthub.models.project import Project, ProjectLike, ProjectRating
from projecthub.models.user import User, UserFavorite
from projecthub.services.identity_service import create_access_token


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        users = [
            User(uid="seed-alice", email="alice@example.com", display_name="Alice Kim", bio="Backend tinkerer"),
            User(uid="seed-bob", email="bob@example.com", display_name="Bob Lee", bio="Frontend and games"),
            User(uid="seed-carol", email="carol@example.com", display_name="Carol Park", bio=""),
        ]
        db.add_all(users)
        db.flush()
        alice, bob, carol = users

        samples = [
            (alice, "Rust Ray Tracer", "A weekend ray tracer written in Rust.", ["rust", "graphics"],
             "https://github.com/example/raytracer", ""),
            (alice, "Pantry API", "FastAPI service that tracks what is left in the pantry.", ["python", "fastapi"],
             "https://github.com/example/pantry", "https://pantry.example.com"),
            (bob, "Pixel Dungeon", "Browser roguelike with procedurally generated floors.", ["javascript", "games"],
             "https://github.com/example/dungeon", "https://dungeon.example.com"),
            (carol, "Tiny Shell", "A minimal POSIX shell for learning process control.", ["c", "systems", "rust"],
             "https://github.com/example/tinysh", ""),
        ]
        projects = []
        for author, title, description, tags, github_link, live_link in samples:
            project = Project(
                title=title,
                description=description,
                github_link=github_link,
                live_link=live_link,
                author_id=author.user_id,
                author_name=author.display_name,
            )
            project.tags = tags
            projects.append(project)
        db.add_all(projects)
        db.flush()

        db.add_all([
            ProjectLike(project_id=projects[0].project_id, user_id=bob.user_id),
            ProjectLike(project_id=projects[0].project_id, user_id=carol.user_id),
            ProjectLike(project_id=projects[2].project_id, user_id=alice.user_id),
            ProjectRating(project_id=projects[0].project_id, user_id=bob.user_id, rating=5),
            ProjectRating(project_id=projects[0].project_id, user_id=carol.user_id, rating=4),
            ProjectRating(project_id=projects[2].project_id, user_id=alice.user_id, rating=3),
            Comment(project_id=projects[0].project_id, author_id=bob.user_id,
                    author_name=bob.display_name, text="Lovely soft shadows!"),
            Comment(project_id=projects[2].project_id, author_id=carol.user_id,
                    author_name=carol.display_name, text="Floor 7 is brutal."),
            UserFavorite(user_id=alice.user_id, project_id=projects[2].project_id),
        ])
        db.commit()
        print("Seed data inserted successfully.")
        for user in users:
            print(f"  {user.display_name}: Bearer {create_access_token(user.uid, email=user.email, name=user.display_name)}")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
