from pydantic import BaseModel
from typing import List


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    points: int
    is_admin: bool


###################
### Leaderboard ###
###################
class LeaderboardEntry(BaseModel):
    id: int
    name: str
    points: int


class LeaderboardOut(BaseModel):
    success: bool = True
    data: List[LeaderboardEntry]
