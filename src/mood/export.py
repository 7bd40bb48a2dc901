"""Mood data export functionality."""

import json
from datetime import date, datetime
from pathlib import Path

from .models import mood_label
from .store import MoodStore


class MoodExporter:
    """Export a user's mood entries to JSON or Markdown."""

    def __init__(self, store: MoodStore):
        self.store = store

    @staticmethod
    def default_filename(fmt: str = "json", today: date | None = None) -> str:
        suffix = "md" if fmt == "markdown" else "json"
        return f"mood-tracker-data-{(today or date.today()).isoformat()}.{suffix}"

    def build_payload(self, user_id: str) -> dict:
        entries = [e.to_dict() for e in self.store.list_entries(user_id)]
        return {
            "exported_at": datetime.now().isoformat(),
            "count": len(entries),
            "entries": entries,
        }

    def to_json(self, user_id: str) -> str:
        return json.dumps(self.build_payload(user_id), indent=2, ensure_ascii=False)

    def export_json(self, user_id: str, output_path: Path) -> int:
        """Export entries to JSON.

        Args:
            user_id: Owner of the entries
            output_path: Output file path

        Returns:
            Number of entries exported
        """
        payload = self.build_payload(user_id)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)

        return payload["count"]

    def export_markdown(self, user_id: str, output_path: Path) -> int:
        """Export entries to Markdown, newest first.

        Returns:
            Number of entries exported
        """
        entries = self.store.list_entries(user_id)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        lines = [
            "# Mood Export",
            "",
            f"Exported: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            f"Entries: {len(entries)}",
            "",
            "---",
            "",
        ]

        for entry in entries:
            lines.append(f"## {entry.date.isoformat()}: {mood_label(entry.mood)} ({entry.mood}/5)")
            lines.append("")
            lines.append(f"**Logged:** {entry.timestamp.strftime('%Y-%m-%d %H:%M')}")
            if entry.tags:
                lines.append(f"**Tags:** {', '.join(entry.tags)}")
            if entry.note:
                lines.append("")
                lines.append(entry.note)
            lines.append("")
            lines.append("---")
            lines.append("")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

        return len(entries)
