"""Supabase repository for user-created habits and exercises."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.content import ContentItem, ContentKind, ContentSource
from fitness_tracker.services.content import ContentRepository


@dataclass(frozen=True)
class _Tables:
    items: str
    completions: str
    item_column: str


_TABLES = {
    ContentKind.HABIT: _Tables(
        "checklist_items", "checklist_completions", "checklist_item_id"
    ),
    ContentKind.EXERCISE: _Tables(
        "custom_exercises", "exercise_completions", "exercise_id"
    ),
}


@dataclass
class SupabaseContentRepository(ContentRepository):
    """Supabase implementation for durable content items."""

    client: Client

    def list_items(
        self, user_id: UUID, kind: ContentKind, day: date
    ) -> list[ContentItem]:
        """Return recurring items plus one-off items created on the day."""
        tables = _TABLES[kind]
        response = (
            self.client.table(tables.items)
            .select("*")
            .eq("user_id", str(user_id))
            .or_(f"is_recurring.eq.true,created_date.eq.{day.isoformat()}")
            .order("sort_order", desc=False)
            .execute()
        )
        rows = response.data or []
        if not rows:
            return []
        completions = (
            self.client.table(tables.completions)
            .select(f"id, {tables.item_column}, is_completed")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .in_(tables.item_column, [str(row["id"]) for row in rows])
            .execute()
        )
        by_item = {
            str(row[tables.item_column]): row for row in completions.data or []
        }
        return [_parse_item(kind, row, by_item.get(str(row["id"]))) for row in rows]

    def create_item(
        self, user_id: UUID, kind: ContentKind, day: date, payload: dict[str, object]
    ) -> ContentItem:
        """Insert a durable item and return it."""
        response = (
            self.client.table(_TABLES[kind].items)
            .insert(
                {
                    **payload,
                    "user_id": str(user_id),
                    "is_custom": True,
                    "created_date": day.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to create {kind.value} item")
        return _parse_item(kind, response.data[0], None)

    def save_completion(  # noqa: PLR0913
        self,
        user_id: UUID,
        kind: ContentKind,
        item_id: str,
        day: date,
        completed: bool,
        completion_record_id: str | None,
    ) -> str:
        """Update the day's completion record, inserting it on first toggle."""
        tables = _TABLES[kind]
        values = {
            "is_completed": completed,
            "completed_at": datetime.now(tz=UTC).isoformat() if completed else None,
        }
        table = self.client.table(tables.completions)
        if completion_record_id:
            response = table.update(values).eq("id", completion_record_id).execute()
        else:
            response = table.insert(
                {
                    **values,
                    "user_id": str(user_id),
                    tables.item_column: item_id,
                    "date": day.isoformat(),
                }
            ).execute()
        if not response.data:
            raise RuntimeError("Failed to save completion")
        return str(response.data[0]["id"])

    def delete_item(self, kind: ContentKind, item_id: str) -> None:
        """Delete an item together with its completion records."""
        tables = _TABLES[kind]
        self.client.table(tables.completions).delete().eq(
            tables.item_column, item_id
        ).execute()
        self.client.table(tables.items).delete().eq("id", item_id).execute()


def _parse_item(
    kind: ContentKind, row: dict[str, object], completion: dict[str, object] | None
) -> ContentItem:
    return ContentItem(
        id=str(row["id"]),
        kind=kind,
        title=str(row.get("title", "")),
        subtitle=str(row.get("subtitle") or ""),
        icon_ref=str(row.get("icon") or "checkbox"),
        source=ContentSource.DURABLE,
        completed=bool(completion and completion.get("is_completed")),
        completion_record_id=str(completion["id"]) if completion else None,
        recurring=bool(row.get("is_recurring", False)),
        sort_order=int(row.get("sort_order") or 0),
        calories=int(row.get("calories") or 0),
        duration=row.get("duration"),
    )
