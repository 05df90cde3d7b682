"""
Precision-test protocol catalog.

The protocol fixes, for each sub-test, how many series are shot and what
each series targets.  Every sub-test alternates between two variants:
even indices take the first variant, odd indices the second.

=============  ======  ==========================================
Sub-test       Series  Alternation (even / odd)
=============  ======  ==========================================
groundstrokes  20      fh_cross / bh_cross
combined       10      lungolinea / diagonale
return         10      right (deuce) / left (ad)
serve           6      1st serve from right / 2nd serve from left
volley         10      fh_volley / bh_volley
=============  ======  ==========================================

56 series of 10 shots, 560 attempts in total.

Serve target strips
-------------------
Every serve series also records the chosen strip (``T``, ``body`` or
``wide``).  The same strip may not be chosen three times in a row; see
:func:`is_strip_allowed`.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from app.schemas.protocol import (
    Category,
    CategoryTarget,
    Direction,
    SeriesSpec,
    ServeType,
    Side,
    TargetStrip,
    TestType,
    WizardStep,
)
from app.schemas.series import SHOTS_PER_SERIES

# ======================================================================
# Series catalog
# ======================================================================


def _alternating(test_type: TestType, count: int, even: Direction, odd: Direction,
                 even_label: str, odd_label: str, ) -> list[SeriesSpec]:
    return [SeriesSpec(test_type=test_type, series_index=i, direction=even if i % 2 == 0 else odd,
                       label=f"Serie {i + 1} — {even_label if i % 2 == 0 else odd_label}", ) for i in range(count)]


GROUNDSTROKES_SERIES: list[SeriesSpec] = _alternating(TestType.GROUNDSTROKES, 20, Direction.FH_CROSS,
                                                      Direction.BH_CROSS, "FH Incrociato", "BH Incrociato", )

COMBINED_SERIES: list[SeriesSpec] = _alternating(TestType.COMBINED, 10, Direction.LUNGOLINEA, Direction.DIAGONALE,
                                                 "Lungolinea", "Diagonale", )

RETURN_SERIES: list[SeriesSpec] = _alternating(TestType.RETURN, 10, Direction.RIGHT, Direction.LEFT,
                                               "Palla da Destra (deuce)", "Palla da Sinistra (ad)", )

SERVE_SERIES: list[SeriesSpec] = [
    SeriesSpec(test_type=TestType.SERVE, series_index=i,
               serve_type=ServeType.PRIMA if i % 2 == 0 else ServeType.SECONDA,
               side=Side.RIGHT if i % 2 == 0 else Side.LEFT,
               label=f"Serie {i + 1} — "
                     f"{'1ª Servizio da Destra' if i % 2 == 0 else '2ª Servizio da Sinistra'}", )
    for i in range(6)]

VOLLEY_SERIES: list[SeriesSpec] = _alternating(TestType.VOLLEY, 10, Direction.FH_VOLLEY, Direction.BH_VOLLEY,
                                               "Volee FH Incrociata", "Volee BH Incrociata", )

# Wizard order
PROTOCOL: dict[TestType, list[SeriesSpec]] = {
    TestType.GROUNDSTROKES: GROUNDSTROKES_SERIES,
    TestType.COMBINED: COMBINED_SERIES,
    TestType.RETURN: RETURN_SERIES,
    TestType.SERVE: SERVE_SERIES,
    TestType.VOLLEY: VOLLEY_SERIES,
}

TOTAL_SERIES: int = sum(len(specs) for specs in PROTOCOL.values())
TOTAL_SHOTS: int = TOTAL_SERIES * SHOTS_PER_SERIES


def get_series_spec(test_type: TestType | str, series_index: int) -> Optional[SeriesSpec]:
    """Look up the catalog entry.  Returns ``None`` outside the protocol."""
    specs = PROTOCOL.get(TestType(test_type), [])
    if 0 <= series_index < len(specs):
        return specs[series_index]
    return None


# ======================================================================
# Serve strip rotation
# ======================================================================

STRIPS: list[TargetStrip] = [TargetStrip.T, TargetStrip.BODY, TargetStrip.WIDE]


def is_strip_allowed(previous_strips: Sequence[TargetStrip | str], proposed: TargetStrip | str) -> bool:
    """Return ``True`` if *proposed* may follow *previous_strips*.

    A strip is refused only when the two most recent choices are equal
    to each other and to *proposed*.  Older history is irrelevant.

    *previous_strips* must be the strips already chosen by this player,
    in serve order.
    """
    if len(previous_strips) < 2:
        return True
    last = TargetStrip(previous_strips[-1])
    second_last = TargetStrip(previous_strips[-2])
    return not (last == second_last == TargetStrip(proposed))


def allowed_strips(previous_strips: Sequence[TargetStrip | str]) -> list[TargetStrip]:
    """Strips that may be chosen next, in catalog order."""
    return [strip for strip in STRIPS if is_strip_allowed(previous_strips, strip)]


def serve_strip_history(series: Iterable, before_index: Optional[int] = None) -> list[TargetStrip]:
    """Strips of the recorded serve series sorted by serve order.

    With *before_index* only series strictly before that index are
    returned, which is the history the wizard passes to
    :func:`is_strip_allowed` for the series at *before_index*.
    """
    serves = sorted((s for s in series if s.test_type == TestType.SERVE), key=lambda s: s.series_index)
    if before_index is not None:
        serves = [s for s in serves if s.series_index < before_index]
    return [TargetStrip(s.target_strip) for s in serves]


# ======================================================================
# Categories and wizard
# ======================================================================

CATEGORY_LABELS: dict[Category, str] = {
    Category.U10_U12: "U10/U12",
    Category.TERZA: "3ª Categoria",
    Category.SECONDA: "2ª Categoria",
    Category.PRIMA: "1ª Categoria",
}

CATEGORY_TARGETS: dict[Category, CategoryTarget] = {
    Category.TERZA: CategoryTarget(label="3ª Categoria", groundstroke="1m × 1m", volley="1.5m",
                                   serve="2.06m + 2.06m + rif. 1m",
                                   description="Zone ampie per principianti avanzati", ),
    Category.SECONDA: CategoryTarget(label="2ª Categoria", groundstroke="1.5m × 2m", volley="1.2m",
                                     serve="1.2m × 3 strisce",
                                     description="Zone intermedie per giocatori competitivi", ),
    Category.PRIMA: CategoryTarget(label="1ª Categoria", groundstroke="2m × 3m", volley="0.7m",
                                   serve="0.7m × 3 strisce", description="Zone precise per giocatori agonisti", ),
}

WIZARD_STEPS: list[WizardStep] = [
    WizardStep(id="meta", label="Info", title="Sessione & Categoria"),
    WizardStep(id="groundstrokes", label="Groundstrokes", title="Groundstrokes (20 serie)"),
    WizardStep(id="combined", label="Combined", title="Combined (10 serie)"),
    WizardStep(id="return", label="Return", title="Return (10 serie)"),
    WizardStep(id="serve", label="Servizio", title="Servizio (6 serie)"),
    WizardStep(id="volley", label="Volley", title="Volley (10 serie)"),
    WizardStep(id="review", label="Review", title="Riepilogo & Salva"),
]
