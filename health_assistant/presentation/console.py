"""Plain-text rendering of user records for the console."""

from typing import Iterable, List

from health_assistant.domain.health_profile.core.entities.user_record import UserRecord

WIDTH = 60


def center(text: str, width: int = WIDTH) -> str:
    """Pad text on both sides to the given width.

    Extra padding goes to the right. Text longer than width is returned
    unchanged.
    """
    if width < len(text):
        return text
    diff = width - len(text)
    left = diff // 2
    return " " * left + text + " " * (diff - left)


def _num(value: float) -> str:
    return f"{value:.2f}"


def render_user_summary(record: UserRecord, width: int = WIDTH) -> str:
    """Render the profile summary of one record."""
    lines: List[str] = [center("--- USER PROFILE SUMMARY ---", width), ""]

    lines.append(center("Personal Details:", width))
    lines.append(center(f"Name: {record.name}", width))
    lines.append(center(f"Gender: {record.gender}", width))
    lines.append(center(f"Age (years): {record.age}", width))
    lines.append(center(f"Height (cm): {_num(record.height)}", width))
    if record.is_female:
        lines.append(center(f"Hip (cm): {_num(record.hip)}", width))

    lines += ["", center("Body Measurements:", width)]
    lines.append(center(f"Weight (kg): {_num(record.weight)}", width))
    lines.append(center(f"Waist (cm): {_num(record.waist)}", width))
    lines.append(center(f"Neck (cm): {_num(record.neck)}", width))

    lines += ["", center("Lifestyle:", width)]
    lines.append(center(f"Activity Level: {record.lifestyle}", width))

    category = record.body_fat_category or ""
    lines += ["", center("Health Metrics:", width)]
    lines.append(
        center(f"Body Fat Percentage: {_num(record.body_fat_percent)}% ({category})", width)
    )
    lines.append(
        center(f"Daily Caloric Intake (calories): {_num(record.daily_calories)}", width)
    )

    lines += ["", center("Macronutrient Breakdown (grams):", width)]
    lines.append(center(f"Carbs: {_num(record.carbs_g)}g", width))
    lines.append(center(f"Protein: {_num(record.protein_g)}g", width))
    lines.append(center(f"Fat: {_num(record.fat_g)}g", width))
    lines.append("")

    return "\n".join(lines)


def render_roster(records: Iterable[UserRecord], width: int = WIDTH) -> str:
    """Render every record between BEGIN/END banners."""
    parts = [center("--- BEGIN ALL USER ---", width), ""]
    parts.extend(render_user_summary(record, width) for record in records)
    parts += [center("--- END ALL USER ---", width), ""]
    return "\n".join(parts)
