import logging

from match_predictor.src.models.match import MatchContext, SeasonStatistics, Team
from match_predictor.src.utils.sportmonks_client import SportmonksClient

logger = logging.getLogger(__name__)


async def fetch_match_context(
    client: SportmonksClient, team1_name: str, team2_name: str
) -> MatchContext:
    """Collect everything needed to predict ``team1_name`` vs ``team2_name``.

    Calls run one after another through the client's pacer. Any failure
    propagates; a partial context is never returned.
    """
    await client.populate_reference_cache()

    team1_id = await client.get_team_id(team1_name)
    team2_id = await client.get_team_id(team2_name)
    logger.info(f"Resolved {team1_name} -> {team1_id}, {team2_name} -> {team2_id}")

    team1_stats = await client.get_team_stats(team1_id)
    team2_stats = await client.get_team_stats(team2_id)

    head_to_head = await client.get_head_to_head(team1_id, team2_id)
    pre_match_news = await client.get_pre_match_news(team1_id, team2_id)

    season_id = await client.get_current_season_id()
    season_stats = SeasonStatistics(
        season_id=season_id,
        team1=await client.get_season_statistics(team1_id, season_id),
        team2=await client.get_season_statistics(team2_id, season_id),
    )
    logger.info(
        f"Collected match context: {len(pre_match_news)} news items, season {season_id}"
    )

    return MatchContext(
        team1=Team(name=team1_name, id=team1_id, stats=team1_stats),
        team2=Team(name=team2_name, id=team2_id, stats=team2_stats),
        head_to_head=head_to_head,
        pre_match_news=pre_match_news,
        season_stats=season_stats,
    )
