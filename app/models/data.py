from datetime import datetime
from typing import Optional
from uuid import UUID


class GameRec:
    __slots__ = ('id', 'name', 'creator', 'plays', 'created_at')

    def __init__(self, id: UUID, name: str, creator: str, plays: int,
                 created_at: Optional[datetime] = None):
        self.id = id
        self.name = name
        self.creator = creator
        self.plays = int(plays)
        self.created_at = created_at

    @classmethod
    def from_record(cls, record) -> 'GameRec':
        """Build a GameRec from an asyncpg Record (or any mapping with the same keys)"""
        return cls(
            id=record['id'],
            name=record['name'],
            creator=record['creator'],
            plays=record['plays'],
            created_at=record['created_at'],
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'creator': self.creator,
            'plays': self.plays,
            'created_at': self.created_at
        }

    def __eq__(self, other):
        if not isinstance(other, GameRec):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"GameRec(id={self.id!s}, name={self.name!r}, plays={self.plays})"
