from uuid import UUID


class DatabaseError(Exception):
    """Base class for failures raised by the data access layer"""


class GameNotFoundError(DatabaseError):
    def __init__(self, game_id: UUID):
        self.game_id = game_id
        super().__init__(f"Game with ID: {game_id} not found")


class GameAlreadyExistsError(DatabaseError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Game with name '{name}' already exists")


class StoreError(DatabaseError):
    """Any other store failure: connectivity, unexpected constraint violations, decoding"""
