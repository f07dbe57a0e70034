from __future__ import annotations

import logging
from typing import Callable, List, Optional

from dotenv import dotenv_values

from . import state, transition
from .catalog import EnvLayout
from .log_utils import SUCCESS
from .prompt import confirm
from .validation import ValidationResult, check_environment

logger = logging.getLogger(__name__)


class EnvSwitcher:
    """Switch the live ``.env`` between the profiles of one working root."""

    def __init__(self, layout: EnvLayout):
        self.layout = layout

    @property
    def environments(self):
        return self.layout.environments

    def check(self, requested: str) -> ValidationResult:
        return check_environment(requested, self.environments)

    def detect_active(self) -> Optional[str]:
        return state.detect_active(self.layout)

    def active_markers(self) -> List[str]:
        return state.find_active_markers(self.layout)

    def switch_to(self, target: str, currently_active: Optional[str]) -> None:
        transition.switch_to(self.layout, target, currently_active)

    def run(
        self,
        requested: str,
        force: bool = False,
        reader: Callable[[str], str] = input,
    ) -> bool:
        """Validate, confirm and switch. Returns False when the user cancels.

        Raises InvalidEnvironmentError or FileOperationError on failure.
        """

        result = self.check(requested)
        if result.error is not None:
            raise result.error
        target = result.environment

        markers = self.active_markers()
        active = self.detect_active()
        if len(markers) > 1:
            logger.warning(
                "Multiple active markers found (%s); treating %s as active.",
                ", ".join(markers),
                active,
            )

        logger.info("New Environment:\t%s", target)
        logger.info("Active Environment:\t%s", active or "None")

        if target == active:
            logger.info('No action needed. Already in "%s" environment.', target)
            return True

        if not confirm(target, force, reader):
            logger.info("Operation cancelled.")
            return False

        self.switch_to(target, active)
        logger.log(SUCCESS, 'Successfully switched to "%s" environment.', target)
        self._report_live_file()
        return True

    def _report_live_file(self) -> None:
        live = self.layout.live_file
        try:
            values = dotenv_values(live)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not parse %s: %s", live, exc)
            return
        logger.debug("%d variables now live in %s", len(values), live)
