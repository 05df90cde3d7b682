"""
CSV export of sessions and session history.

Every cell is double-quoted; averages, deviations and areas carry three
decimals, percent of ideal two decimals and a trailing ``%``.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

from app.precision.aggregator import compute_session_results
from app.schemas.protocol import PrecisionTimeStrategy, StdDevMode
from app.schemas.session import TestSession

HISTORY_HEADER = ["Giocatore", "Data", "Categoria", "Coach", "DataNascita", "Nota", "Serve_Ave", "Serve_Dev", "FH_Ave",
                  "FH_Dev", "Combined_Ave", "Combined_Dev", "Return_Ave", "Return_Dev", "BH_Ave", "BH_Dev",
                  "Volley_Ave", "Volley_Dev", "Area", "%Ideale", ]

_HISTORY_STROKES = ["serve", "forehand", "combined", "return", "backhand", "volley"]


def _write(rows: Iterable[Sequence]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        if row:
            writer.writerow(row)
        else:
            buffer.write("\n")
    return buffer.getvalue().rstrip("\n")


def _text(value) -> str:
    if value is None:
        return ""
    return str(getattr(value, "value", value))


def export_session_csv(session: TestSession, std_dev_mode: StdDevMode | str = StdDevMode.SAMPLE,
                       precision_time_strategy: PrecisionTimeStrategy | str = PrecisionTimeStrategy.A, ) -> str:
    """Header block, stroke table, radar figures and raw series of one session."""
    results = compute_session_results(session, std_dev_mode, precision_time_strategy)

    rows: list[list] = [["Tennis Precision Test — Sessione"], ["Giocatore", session.player_name],
                        ["Data", session.date.isoformat()], ["Categoria", _text(session.category)],
                        ["Coach", session.coach], ]
    if session.date_of_birth:
        rows.append(["Data di Nascita", session.date_of_birth.isoformat()])
    if session.note:
        rows.append(["Nota", session.note])
    rows.append([])

    rows.append(["Stroke", "Label", "Ave", "Dev", "N Serie"])
    for s in results.stats:
        rows.append([_text(s.stroke), s.label, f"{s.ave:.3f}", f"{s.dev:.3f}", len(s.scores)])
    rows.append([])

    rows.append(["Area Radar", f"{results.radar_area:.3f}"])
    rows.append(["% Ideale", f"{results.percent_of_ideal:.2f}%"])
    rows.append([])

    rows.append(["Test", "Serie", "Score", "Direzione", "Tipo Servizio", "Striscia", "Lato"])
    for s in session.series:
        rows.append([_text(s.test_type), s.series_index + 1, s.score, _text(getattr(s, "direction", None)),
                     _text(getattr(s, "serve_type", None)), _text(getattr(s, "target_strip", None)),
                     _text(getattr(s, "side", None)), ])
    return _write(rows)


def export_history_csv(sessions: Iterable[TestSession], std_dev_mode: StdDevMode | str = StdDevMode.SAMPLE,
                       precision_time_strategy: PrecisionTimeStrategy | str = PrecisionTimeStrategy.A, ) -> str:
    """One line per session with stroke averages, deviations, area and percent."""
    rows: list[list] = [HISTORY_HEADER]
    for session in sessions:
        results = compute_session_results(session, std_dev_mode, precision_time_strategy)
        by_stroke = {_text(s.stroke): s for s in results.stats}
        row = [session.player_name, session.date.isoformat(), _text(session.category), session.coach,
               session.date_of_birth.isoformat() if session.date_of_birth else "", session.note or "", ]
        for stroke in _HISTORY_STROKES:
            row.extend([f"{by_stroke[stroke].ave:.3f}", f"{by_stroke[stroke].dev:.3f}"])
        row.extend([f"{results.radar_area:.3f}", f"{results.percent_of_ideal:.2f}%"])
        rows.append(row)
    return _write(rows)
