"""Match entity representing a complete match."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .participant import Participant


@dataclass(frozen=True)
class Match:
    """A finished match as returned by match-v5."""

    match_id: str
    game_mode: str = ""
    queue_id: int = 0
    game_duration: int = 0  # Seconds
    game_version: str = ""
    participants: Tuple[Participant, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Match":
        """Build from a match-v5 payload (``metadata`` + ``info``)."""
        metadata = data['metadata']
        info = data['info']
        return cls(
            match_id=metadata['matchId'],
            game_mode=info.get('gameMode', ''),
            queue_id=int(info.get('queueId', 0)),
            game_duration=int(info.get('gameDuration', 0)),
            game_version=info.get('gameVersion', ''),
            participants=tuple(Participant.from_api(p) for p in info['participants']),
        )

    def find_participant(self, puuid: str) -> Optional[Participant]:
        return next((p for p in self.participants if p.puuid == puuid), None)
