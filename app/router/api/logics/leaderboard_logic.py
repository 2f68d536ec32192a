from sqlalchemy.orm import Session

from app.model.users import User
from app.schema.user_schema import LeaderboardEntry, LeaderboardOut

LEADERBOARD_SIZE = 20


def get_leaderboard_logic(db: Session, limit: int = LEADERBOARD_SIZE) -> LeaderboardOut:
    """Top users by points; ties go to the lower user id."""
    leaders = (
        db.query(User.id, User.name, User.points)
        .order_by(User.points.desc(), User.id.asc())
        .limit(limit)
        .all()
    )
    return LeaderboardOut(
        data=[LeaderboardEntry(id=u.id, name=u.name, points=u.points) for u in leaders]
    )
