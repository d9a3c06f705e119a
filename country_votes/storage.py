# country_votes/storage.py
import json
import os
import tempfile
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from .errors import DuplicateVoteError, StorageError, ValidationError
from .models.vote_model import Vote, VoteIn

logger = logging.getLogger(__name__)


class VoteStore:
    """
    Votes kept as a single JSON array on disk.
    Every write rewrites the whole file and every read goes back to disk.
    No locking: two concurrent submissions with the same email can both
    pass the duplicate check.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_db(self) -> List[Dict[str, Any]]:
        """
        Read the raw vote list.
        A missing or empty file means no votes yet; anything unparsable is a StorageError.
        """
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read vote file {self.path}: {e}")
            raise StorageError(f"Could not read vote database: {e}")

        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Vote file {self.path} is corrupted: {e}")
            raise StorageError(f"Vote database is corrupted: {e}")

        if not isinstance(data, list):
            raise StorageError("Vote database must contain a JSON array")
        return data

    def _write_db(self, data: List[Dict[str, Any]]) -> None:
        """Dump to a temp file beside the vote file, then swap it in."""
        directory = os.path.dirname(self.path)
        tmp_path = None
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory or ".", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Could not write vote file {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Could not write vote database: {e}")

    def read_all(self) -> List[Vote]:
        try:
            return [Vote(**record) for record in self._read_db()]
        except (PydanticValidationError, TypeError) as e:
            raise StorageError(f"Vote database holds an invalid record: {e}")

    def find_by_email(self, email: str) -> Optional[Vote]:
        for vote in self.read_all():
            if vote.email == email:
                return vote
        return None

    def append(self, vote_in: VoteIn) -> Vote:
        """
        Validate, check the email is unused, then persist the full vote list.

        Args:
            vote_in: submitted name, email and country

        Returns:
            The stored Vote

        Raises:
            ValidationError: a field is missing or blank (nothing is read or written)
            DuplicateVoteError: the email already voted
        """
        if not all(v and v.strip() for v in (vote_in.name, vote_in.email, vote_in.country)):
            logger.warning("Rejected vote with missing fields")
            raise ValidationError()

        vote = Vote(name=vote_in.name, email=vote_in.email, country=vote_in.country)
        votes = self.read_all()
        if any(existing.email == vote.email for existing in votes):
            logger.warning(f"Duplicate vote for {vote.email}")
            raise DuplicateVoteError()

        votes.append(vote)
        self._write_db([v.model_dump() for v in votes])
        logger.info(f"Vote for {vote.country} registered by {vote.email}")
        return vote

    def reset(self) -> None:
        """Create the vote file, or empty it if it already exists."""
        self._write_db([])
        logger.info(f"Vote database reset at {self.path}")
