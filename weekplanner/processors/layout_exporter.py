# File: weekplanner/processors/layout_exporter.py
"""
Output boundary: JSON export and console summary of a LayoutResult.
"""

import datetime
import json
from pathlib import Path

from weekplanner.core.config_manager import Config
from weekplanner.layout.time_slots import TimeSlotIndex
from weekplanner.models import DayLayout, LayoutResult
from weekplanner.utils.logger import setup_logger

logger = setup_logger(__name__)


class LayoutExporter:
    """Writes layouts for the export renderer and prints them for humans."""

    def save(self, result: LayoutResult, filepath: Path = Config.LAYOUT_OUTPUT_FILE) -> bool:
        """
        Save layout JSON to file.

        Args:
            result: Layout to save
            filepath: Output file path

        Returns:
            True if successful, False otherwise
        """
        data_to_save = result.to_dict()
        data_to_save["generated_at"] = datetime.datetime.now().isoformat()

        try:
            filepath = Path(filepath)
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(filepath, 'w', encoding="utf-8") as f:
                json.dump(data_to_save, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Could not save layout: {e}", exc_info=True)
            return False

        logger.info(f"Layout saved to {filepath}")
        return True

    def pretty_print(self, result: LayoutResult) -> None:
        """Print a day-by-day summary of the layout to stdout."""
        print("\n" + "=" * 60)
        print("      WEEKLY PLANNER LAYOUT")
        print("=" * 60)

        for day_layout in result.days:
            self._print_day(day_layout)

        print("\n" + "=" * 60)
        print(f"Days: {len(result.days)} | "
              f"Placements: {sum(d.event_count for d in result.days)} | "
              f"Warnings: {len(result.diagnostics)}")
        if result.has_warnings():
            for diagnostic in result.diagnostics:
                print(f"  ! {diagnostic}")
        else:
            print("  No warnings")
        print("=" * 60 + "\n")

    @staticmethod
    def _print_day(day_layout: DayLayout) -> None:
        print(f"\n {day_layout.date.strftime('%A, %B %d').upper()}:")
        print("-" * 60)

        if not day_layout.event_count:
            print("  No events")
            return

        for placed in day_layout.all_day:
            print(f"  [ALL DAY] {placed.display_title} ({placed.source_label})")

        slots = TimeSlotIndex.slots()
        for placed in day_layout.timed:
            first = slots[placed.start_slot].label
            print(f"  {placed.time_range}  {placed.display_title} "
                  f"[{placed.variant.value}] slots {placed.start_slot}-{placed.end_slot_exclusive} "
                  f"from {first}, col {placed.column + 1}/{placed.column_count}")
