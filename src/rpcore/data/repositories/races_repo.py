"""Races repository: base races with their nested subraces."""
from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Dict, Mapping, Tuple

from rpcore.data.errors import DataValidationError
from rpcore.data.repositories.base import RepositoryBase
from rpcore.domain import trait_keys as keys
from rpcore.domain.defs import RacialTraits
from rpcore.domain.racial_traits_builder import TraitCoercers, build_base_race, build_subrace

logger = logging.getLogger(__name__)

RACES_KEY = "races"


class RacesRepository(RepositoryBase[RacialTraits]):
    """Loads races keyed by name.

    Races missing a required trait are logged and skipped so one bad entry
    does not stop the rest of the file from loading.
    """

    def __init__(
        self,
        base_path: Path | str | None = None,
        filename: str = "races.json",
        coercers: TraitCoercers | None = None,
    ) -> None:
        super().__init__(filename, base_path)
        self._coercers = coercers

    @classmethod
    def from_config(cls, config: Mapping[str, str]) -> RacesRepository:
        """Create a repository from a dict returned by ``rpcore.config.load_config``."""
        return cls(
            base_path=config.get("definitions_path") or None,
            filename=config.get("races_file") or "races.json",
        )

    def _build(self, raw: dict[str, object]) -> Dict[str, RacialTraits]:
        entries = self._require_list(raw.get(RACES_KEY), f"'{RACES_KEY}' in {self._filename}")

        races: Dict[str, RacialTraits] = {}
        for index, payload in enumerate(entries):
            context = f"race #{index}"
            race_data = self._require_mapping(payload, context)

            def report_missing(key: str, context: str = context) -> None:
                logger.warning("Skipping %s: missing or invalid required trait '%s'.", context, key)

            race = build_base_race(race_data, coercers=self._coercers, on_missing=report_missing)
            if race is None:
                continue
            if race.name in races:
                raise DataValidationError(f"{context} duplicates race name '{race.name}'.")

            subraces = self._build_subraces(race, race_data.get(keys.SUBRACES, []), f"race '{race.name}'")
            races[race.name] = dataclasses.replace(race, subraces=subraces)
            logger.debug("Loaded race '%s' with %d subraces", race.name, len(subraces))
        return races

    def _build_subraces(
        self, parent: RacialTraits, raw: object, context: str
    ) -> Tuple[RacialTraits, ...]:
        entries = self._require_list(raw, f"{context} subraces")
        subraces = []
        for index, payload in enumerate(entries):
            subrace_data = self._require_mapping(payload, f"{context} subrace #{index}")
            subraces.append(build_subrace(subrace_data, parent, coercers=self._coercers))
        return tuple(subraces)

    def find(self, name: str) -> RacialTraits | None:
        """Return the race or subrace whose name or alias matches ``name``."""
        wanted = name.casefold()
        for race in self.all():
            if any(candidate.casefold() == wanted for candidate in race.all_names()):
                return race
            subrace = race.find_subrace(name)
            if subrace is not None:
                return subrace
        return None
