"""Display strings for each supported language."""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

WEEKDAY_NAMES = {
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "id": ("Sen", "Sel", "Rab", "Kam", "Jum", "Sab", "Min"),
}

MONTH_NAMES = {
    "en": (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    "id": (
        "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
        "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
    ),
}

LABELS: dict[str, dict[str, str]] = {
    "en": {
        "today": "Today",
        "tomorrow": "Tomorrow",
        "no_date": "No date set",
        "overdue": "Overdue",
        "priority.high": "High",
        "priority.medium": "Medium",
        "priority.low": "Low",
        "error.empty_text": "Task cannot be empty.",
        "error.missing_date": "Date is required.",
        "notify.added": "Task added!",
        "notify.deleted": "Task deleted!",
        "notify.completed": "Task completed!",
        "notify.reopened": "Task marked as not done",
        "notify.cleared": "All tasks deleted!",
        "notify.nothing_to_clear": "No tasks to delete",
        "notify.edit_started": "Now edit your task",
        "warning.unparsed_date": (
            "'{value}' is not a YYYY-MM-DD date; it is kept as typed and sorted last"
        ),
        "empty": "No tasks to show",
    },
    "id": {
        "today": "Hari ini",
        "tomorrow": "Besok",
        "no_date": "Tanggal tidak ditentukan",
        "overdue": "Terlambat",
        "priority.high": "Tinggi",
        "priority.medium": "Sedang",
        "priority.low": "Rendah",
        "error.empty_text": "Tugas tidak boleh kosong.",
        "error.missing_date": "Tanggal harus diisi.",
        "notify.added": "Tugas berhasil ditambahkan!",
        "notify.deleted": "Tugas berhasil dihapus!",
        "notify.completed": "Tugas diselesaikan!",
        "notify.reopened": "Tugas ditandai belum selesai",
        "notify.cleared": "Semua tugas berhasil dihapus!",
        "notify.nothing_to_clear": "Tidak ada tugas untuk dihapus",
        "notify.edit_started": "Sekarang edit tugas Anda",
        "warning.unparsed_date": (
            "'{value}' bukan tanggal YYYY-MM-DD; "
            "disimpan apa adanya dan diurutkan terakhir"
        ),
        "empty": "Tidak ada tugas",
    },
}


def label(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up a display string, falling back to English."""
    table = LABELS.get(language, LABELS[DEFAULT_LANGUAGE])
    return table.get(key, LABELS[DEFAULT_LANGUAGE][key])
