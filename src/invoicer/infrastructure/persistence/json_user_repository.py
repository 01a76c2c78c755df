"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from pathlib import Path

from invoicer.domain.exceptions import ValidationError
from invoicer.domain.model.user import User
from invoicer.domain.repository.user_repository import UserRepository
from invoicer.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- UserRepository interface ---------------------------------------------

    def add(self, user: User) -> User:
        with self._file.locked():
            records = self._file.load()
            # e-mail is unique; re-checked here under the file lock
            if any(r["email"].lower() == user.email.lower() for r in records):
                raise ValidationError("User already exists")
            saved = dataclasses.replace(user, id=self._file.next_id())
            records.append(self._to_raw(saved))
            self._file.persist(records)
        return saved

    def get_by_id(self, user_id: int) -> User | None:
        for raw in self._file.load():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._file.load():
            if raw["email"].lower() == email.lower():
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
