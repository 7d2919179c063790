from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from .config import load_settings
from .container import build_container


def configure_logging(level_name: str) -> None:
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    load_dotenv(override=False)

    settings = load_settings()
    configure_logging(settings.log_level)

    if settings.debug:
        print(f"[salary-system] settings={settings.module} language={settings.language}", file=sys.stderr)

    container = build_container(language=settings.language)
    container.build_shell().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
