import asyncio
import logging

from dotenv import load_dotenv

from match_predictor.src.agents.match_predictor import MatchPredictor
from match_predictor.src.utils.cli import prompt_team_names, run_prediction
from match_predictor.src.utils.display import PredictionDisplay
from match_predictor.src.utils.settings import AppSettings, get_setting

load_dotenv()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # request URLs carry the api token
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def predict_interactively() -> None:
    display = PredictionDisplay()
    async with MatchPredictor.from_settings() as predictor:
        while True:
            # prompts run off the loop so pacer timers and connections stay live
            team1, team2 = await asyncio.to_thread(prompt_team_names)
            await run_prediction(predictor, display, team1, team2)
            print(display.render())

            again = await asyncio.to_thread(input, "Predict another match? [y/N]: ")
            again = again.strip().lower()
            if again not in ("y", "yes"):
                break


def main():
    """Main entry point for the match predictor CLI."""
    configure_logging(get_setting(AppSettings).log_level)
    try:
        asyncio.run(predict_interactively())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
