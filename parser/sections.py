# parser/sections.py
from __future__ import annotations

import logging
from typing import Tuple

from bsx_core.models import SectionState
from parser.patterns import PatternTable, get_table

log = logging.getLogger("parser")


class SectionClassifier:
    """
    Tracks which statement section the current line belongs to.

      NONE --"deposits & credits"--> DEPOSITS
      NONE --"withdrawals" (no "&")--> WITHDRAWALS
      DEPOSITS/WITHDRAWALS --line starting "Total"--> NONE

    A header for the other section switches directly. The terminator is
    checked first, so "Total Deposits & Credits" closes the section.
    """

    def __init__(self, table: PatternTable | None = None):
        self.table = table or get_table()
        self.state = SectionState.NONE

    def reset(self) -> None:
        self.state = SectionState.NONE

    def advance(self, line: str) -> Tuple[SectionState, bool]:
        """
        Feed one line; return (state after the line, whether it was a marker).
        Marker lines carry no transaction and are not offered to the matcher.
        """
        if self.state is not SectionState.NONE and self.table.is_terminator(line):
            log.debug("section %s closed by %r", self.state.value, line)
            self.state = SectionState.NONE
            return self.state, True
        if self.table.is_deposit_header(line):
            self.state = SectionState.DEPOSITS
            log.debug("entered deposits section at %r", line)
            return self.state, True
        if self.table.is_withdrawal_header(line):
            self.state = SectionState.WITHDRAWALS
            log.debug("entered withdrawals section at %r", line)
            return self.state, True
        return self.state, False
