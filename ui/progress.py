# ui/progress.py

from typing import Any, Dict, List, Sequence

def progress_bar(percent: float, length: int = 12) -> str:
    """Текстовый progress bar из блоков; перевыполнение рисуется полной полосой"""
    done = max(0, min(length, int(length * percent // 100)))
    todo = length - done
    return "🟩" * done + "⬜️" * todo + f" {percent:.0f}%"

def check_cell(checked: bool) -> str:
    return "✅" if checked else "·"

def rating_cell(value: int) -> str:
    """0 означает отсутствие записи и показывается пустым"""
    return f"{value:>2}" if value else " -"

def week_header(weeks: Sequence[Dict[str, Any]], days: Sequence[Dict[str, Any]]) -> List[str]:
    """Две строки заголовка: подписи дней недели и номера дней, разделённые по неделям"""
    names, numbers = [], []
    for week in weeks:
        names.append(" ".join(days[i]["dayName"] for i in week["days"]))
        numbers.append(" ".join(f"{days[i]['dayNum']:>2}" for i in week["days"]))
    return [" | ".join(names), " | ".join(numbers)]
