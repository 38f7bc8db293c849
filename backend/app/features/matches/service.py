"""Match history service.

Fetches a player's recent match ids, then assembles one summary per match.
Matches are processed one at a time in id-list order; a failure on one match
is logged and that id skipped, it never aborts the rest of the history.
"""

import json
from typing import List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import ExternalServiceError
from app.core.riot_api.models import AccountDTO
from app.protocols import MatchSource
from .assembler import MatchSummaryAssembler
from .schemas import MatchHistoryResult, MatchHistoryStatus, MatchSummary

logger = structlog.get_logger(__name__)


def parse_match_ids(raw_ids: str) -> List[str]:
    """Decode the match-id list body; an empty body is an empty list."""
    if not raw_ids or not raw_ids.strip():
        return []
    decoded = json.loads(raw_ids)
    if not isinstance(decoded, list):
        raise ValueError("Match id list is not a JSON array")
    return [str(match_id) for match_id in decoded]


class MatchService:
    """Builds match summaries for a player."""

    def __init__(self, client: MatchSource, assembler: MatchSummaryAssembler):
        """
        Initialize the service.

        :param client: Upstream source for match ids, match documents and accounts
        :param assembler: Turns a match document into a summary
        """
        self.client = client
        self.assembler = assembler

    async def get_match_summaries(
        self, puuid: str, start: int = 0, count: int = 10
    ) -> MatchHistoryResult:
        """
        Summaries of the player's most recent matches.

        Errors from the match-id fetch propagate to the caller, and an id list
        that is not a JSON array raises ``ExternalServiceError``. Errors for an
        individual match only cause that match to be skipped.

        :param puuid: Player PUUID
        :param start: Offset into the player's match history
        :param count: Number of match ids to request
        :returns: Result with the summaries in match-id order
        """
        raw_ids = await self.client.fetch_match_ids_by_puuid(puuid, start, count)
        try:
            match_ids = parse_match_ids(raw_ids)
        except ValueError as e:
            raise ExternalServiceError(
                "match id list is not a JSON array",
                operation="get_match_summaries",
                body_excerpt=raw_ids,
                original_error=e,
            ) from e

        if not match_ids:
            logger.info("No matches found for player", puuid=puuid)
            return MatchHistoryResult(status=MatchHistoryStatus.NO_MATCHES, puuid=puuid)

        summaries: List[MatchSummary] = []
        skipped: List[str] = []
        for match_id in match_ids:
            summary = await self._summarize_match(match_id, puuid)
            if summary is None:
                skipped.append(match_id)
            else:
                summaries.append(summary)

        if not summaries:
            logger.warning(
                "Could not parse any match details",
                puuid=puuid,
                match_count=len(match_ids),
            )
            return MatchHistoryResult(
                status=MatchHistoryStatus.NO_PARSABLE_MATCHES,
                puuid=puuid,
                skipped_match_ids=skipped,
            )

        logger.info(
            "Built match history",
            puuid=puuid,
            summary_count=len(summaries),
            skipped_count=len(skipped),
        )
        return MatchHistoryResult(
            status=MatchHistoryStatus.OK,
            puuid=puuid,
            summaries=summaries,
            skipped_match_ids=skipped,
        )

    async def get_match_summaries_by_riot_id(
        self, game_name: str, tag_line: str, start: int = 0, count: int = 10
    ) -> MatchHistoryResult:
        """Resolve a Riot ID to a PUUID, then build that player's history."""
        raw_account = await self.client.fetch_account_by_riot_id(game_name, tag_line)
        puuid = self._extract_puuid(raw_account)
        if not puuid:
            logger.info(
                "Account has no PUUID", game_name=game_name, tag_line=tag_line
            )
            return MatchHistoryResult(status=MatchHistoryStatus.PLAYER_NOT_FOUND)

        return await self.get_match_summaries(puuid, start, count)

    async def _summarize_match(
        self, match_id: str, puuid: str
    ) -> Optional[MatchSummary]:
        try:
            raw_match = await self.client.fetch_match_by_id(match_id)
            summary = await self.assembler.assemble(raw_match, puuid)
        except Exception as e:
            logger.warning(
                "Failed to process match",
                match_id=match_id,
                puuid=puuid,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        if summary is None:
            logger.warning(
                "Match could not be summarized", match_id=match_id, puuid=puuid
            )
        return summary

    @staticmethod
    def _extract_puuid(raw_account: str) -> Optional[str]:
        if not raw_account or not raw_account.strip():
            return None
        try:
            account = AccountDTO.model_validate_json(raw_account)
        except PydanticValidationError:
            return None
        return account.puuid
