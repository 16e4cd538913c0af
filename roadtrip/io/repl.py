"""Interactive prompt loop.

Asks for two country names, prints the shortest land route between them
and starts over, until the exit keyword or end of input.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from ..config import ReplConfig, get_config
from ..services.road_trip import RoadTripService


@dataclass
class RoadTripRepl:
    """Read-eval-print loop over a RoadTripService.

    Prompts and routes go to ``stdout``; invalid-name diagnostics go to
    ``stderr``.
    """

    service: RoadTripService
    config: ReplConfig = field(default_factory=lambda: get_config().repl)
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(self) -> int:
        """Run the loop until the exit keyword or end of input.

        Returns:
            Process exit status (always 0).
        """
        while True:
            source = self._ask_country(self.config.first_prompt)
            if source is None:
                break
            if not source:
                continue

            destination = self._ask_country(self.config.second_prompt)
            if destination is None:
                break
            if not destination:
                continue

            route, diagnostic = self.service.find_route_safe(source, destination)
            if diagnostic:
                self._logger.debug(diagnostic)
            for line in self.service.format_route(route):
                print(line, file=self.stdout)

        self._logger.debug("Prompt loop finished")
        return 0

    def _ask_country(self, prompt: str) -> Optional[str]:
        """Prompt for a country name.

        Returns:
            The trimmed name, ``""`` if it is not a known country, or None
            when the user asked to exit or input ended.
        """
        self.stdout.write(prompt)
        self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            # EOF; keep the terminal tidy after the dangling prompt.
            self.stdout.write("\n")
            return None

        text = line.strip()
        if self._is_exit(text):
            return None

        if not self.service.is_known_country(text):
            print(self.config.invalid_country_message, file=self.stderr)
            return ""
        return text

    def _is_exit(self, text: str) -> bool:
        return text.casefold() == self.config.exit_keyword.casefold()
