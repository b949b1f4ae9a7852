import logging
import sys

from bluetraffic.config import Settings
from bluetraffic.util.errors import DataLoadError
from bluetraffic.util.logging import configure_logging
from bluetraffic.viz.app.single import serve_traffic_map

logger = logging.getLogger("bluetraffic")


def main() -> int:
  settings = Settings.from_env()
  configure_logging(settings.log_level)

  try:
    serve_traffic_map(settings)
  except DataLoadError:
    # no retry, no partial map: the session ends here
    logger.exception("Error loading station/trip data")
    return 1

  return 0


if __name__ == "__main__":
  sys.exit(main())
