SYSTEM_PROMPT = """You are a football analyst. Provide a prediction for the match based on the given team statistics, head-to-head data, pre-match news, and season statistics."""


USER_PROMPT = """Analyze the following data and provide a prediction for the match between {team1_name} and {team2_name}:

Team 1 ({team1_name}) stats: {team1_stats}
Team 2 ({team2_name}) stats: {team2_stats}
Head-to-head data: {head_to_head}
Pre-match news: {pre_match_news}
Season statistics:
- Team 1: {team1_season_stats}
- Team 2: {team2_season_stats}

Please provide a detailed analysis and prediction based on this information."""
