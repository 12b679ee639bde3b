"""
Weekly menu generation.

A menu is built in one linear pass:

1. validate the protein quota against MAX_PROTEIN_SELECTIONS and the day count
2. fill each protein quota from meals whose protein matches exactly
3. top up to the day count with random unused meals from the whole catalog
4. reshuffle and truncate to the day count

Steps 2-4 never fail for lack of data; a small catalog simply yields a
shorter menu. Meal ids already chosen are tracked in a ``used_ids`` set that
is passed explicitly from phase to phase.
"""

import logging
import random
from collections import Counter
from typing import Dict, List, Mapping, Optional, Set

from app.config import settings
from app.exceptions import InvalidDaysError, QuotaExceededError
from repositories.base import CatalogReader

logger = logging.getLogger("menugen.menu")

MAX_PROTEIN_SELECTIONS = 7


def normalize_protein(protein: Optional[str]) -> str:
    """Lowercase/trim a protein label. Used for diagnostics, never for selection."""
    return "" if protein is None else protein.strip().lower()


class MenuService:
    @staticmethod
    def validate_quota(
        protein_distribution: Optional[Mapping[str, Optional[int]]],
        days: int,
    ) -> int:
        """
        Check a menu request before any catalog work.

        Args:
            protein_distribution: protein label -> requested count (may be None)
            days: target number of menu days

        Returns:
            int: sum of the positive quota values

        Raises:
            QuotaExceededError: if the positive quotas sum past MAX_PROTEIN_SELECTIONS
            InvalidDaysError: if days < 1
        """
        total = sum(
            count for count in (protein_distribution or {}).values()
            if count is not None and count > 0
        )
        if total > MAX_PROTEIN_SELECTIONS:
            raise QuotaExceededError(total, MAX_PROTEIN_SELECTIONS)
        if days < 1:
            raise InvalidDaysError(days)
        return total

    @staticmethod
    def fill_protein_quota(
        catalog: CatalogReader,
        protein_distribution: Optional[Mapping[str, Optional[int]]],
        rng: random.Random,
        used_ids: Set[int],
    ) -> List:
        """
        Pick up to ``count`` distinct meals for every protein with a positive count.

        Proteins are handled in the mapping's iteration order; that order is
        not significant. Proteins with no matching meals are skipped.
        Chosen ids are added to ``used_ids``.
        """
        selected: List = []
        if not protein_distribution:
            logger.info("No protein distribution specified, will use random meals")
            return selected

        for protein, count in protein_distribution.items():
            if protein is None or count is None or count <= 0:
                continue

            candidates = list(catalog.fetch_by_protein_exact(protein))
            logger.info(f"Found {len(candidates)} meals for protein {protein!r} (need {count})")
            if not candidates:
                logger.warning(f"No meals found for protein {protein!r}")
                MenuService._log_similar_proteins(catalog, protein)
                continue

            rng.shuffle(candidates)
            added = 0
            for meal in candidates:
                if added >= count:
                    break
                if meal.id is None or meal.id in used_ids:
                    continue
                used_ids.add(meal.id)
                selected.append(meal)
                added += 1
                logger.debug(f"Added meal {meal.name!r} (id: {meal.id}, protein: {meal.protein!r})")

            logger.info(f"Added {added}/{count} meals for protein {protein!r}")

        return selected

    @staticmethod
    def fill_random(
        catalog: CatalogReader,
        needed: int,
        rng: random.Random,
        used_ids: Set[int],
    ) -> List:
        """
        Pick up to ``needed`` random meals from the whole catalog, skipping ``used_ids``.

        Returns fewer than ``needed`` when the catalog runs out.
        """
        if needed <= 0:
            return []

        logger.info(f"Need {needed} more meals, filling with random options")
        candidates = list(catalog.fetch_all())
        rng.shuffle(candidates)

        selected: List = []
        for meal in candidates:
            if len(selected) >= needed:
                break
            if meal.id is None or meal.id in used_ids:
                continue
            used_ids.add(meal.id)
            selected.append(meal)

        if len(selected) < needed:
            logger.info(f"Catalog exhausted: filled {len(selected)} of {needed} slots")
        else:
            logger.info(f"Filled {len(selected)} additional slots")
        return selected

    @staticmethod
    def finalize(selection: List, days: int, rng: random.Random) -> List:
        """Reshuffle so quota picks do not cluster, then keep at most ``days`` meals."""
        menu = list(selection)
        rng.shuffle(menu)
        if len(menu) > days:
            logger.warning(f"Selection overshot target ({len(menu)} > {days}); truncating")
            menu = menu[:days]
        return menu

    @staticmethod
    def generate_menu(
        catalog: CatalogReader,
        protein_distribution: Optional[Mapping[str, Optional[int]]] = None,
        days: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> List:
        """
        Generate a menu of distinct meals honoring the protein quota where possible.

        Args:
            catalog: read-only meal catalog
            protein_distribution: protein label -> requested count; None or {} for a random menu
            days: target menu length; settings.menu_default_days when None
            rng: random source; pass a seeded random.Random for reproducible menus

        Returns:
            List of meals, no repeated ids, length min(days, reachable catalog size)

        Raises:
            QuotaExceededError: positive quotas sum past MAX_PROTEIN_SELECTIONS
            InvalidDaysError: days < 1
            CatalogUnavailableError: propagated from the catalog
        """
        target_days = settings.menu_default_days if days is None else days
        protein_total = MenuService.validate_quota(protein_distribution, target_days)
        logger.info(
            f"Generating menu: days={target_days}, protein total={protein_total}, "
            f"distribution={dict(protein_distribution or {})}"
        )

        rng = rng or random.Random()
        used_ids: Set[int] = set()

        selection = MenuService.fill_protein_quota(
            catalog, protein_distribution, rng, used_ids
        )
        selection += MenuService.fill_random(
            catalog, target_days - len(selection), rng, used_ids
        )
        menu = MenuService.finalize(selection, target_days, rng)

        logger.info(
            f"Generated {len(menu)} meals; protein distribution: "
            f"{MenuService.summarize_proteins(menu)}"
        )
        return menu

    @staticmethod
    def summarize_proteins(menu: List) -> Dict[str, int]:
        """Count meals per protein label"""
        return dict(Counter(meal.protein for meal in menu))

    @staticmethod
    def _log_similar_proteins(catalog: CatalogReader, protein: str) -> None:
        wanted = normalize_protein(protein)
        if not wanted:
            return
        for candidate in catalog.fetch_distinct_proteins():
            normalized = normalize_protein(candidate)
            if normalized and (wanted in normalized or normalized in wanted):
                logger.info(
                    f"Similar protein in catalog: {candidate!r} (normalized: {normalized!r})"
                )
