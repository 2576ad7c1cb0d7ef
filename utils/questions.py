"""Вопросы стендапа"""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml


@dataclass(frozen=True)
class Question:
    """Вопрос стендапа: текст и цветовая метка для итогового отчёта"""
    text: str
    color: str = ""


# Вопросы по умолчанию (если QUESTIONS_FILE не задан)
DEFAULT_QUESTIONS = [
    {"question": "Что ты делал вчера?", "color": "🟠"},
    {"question": "Что планируешь сделать сегодня?", "color": "🔵"},
    {"question": "Есть ли что-то, что мешает работе?", "color": "🟢"},
]


def parse_questions(raw) -> List[Question]:
    """
    Преобразовать список словарей в вопросы

    raw: [{"question": "...", "color": "#f08000"}, ...]
    """
    if not isinstance(raw, list):
        raise ValueError("Список вопросов должен быть списком")

    questions = []
    for i, item in enumerate(raw, start=1):
        if not isinstance(item, dict) or not str(item.get("question") or "").strip():
            raise ValueError(f"Вопрос #{i}: нужно поле 'question'")
        questions.append(Question(
            text=str(item["question"]).strip(),
            color=str(item.get("color") or ""),
        ))
    return questions


def load_questions(path: Optional[str] = None) -> List[Question]:
    """Загрузить вопросы из YAML-файла или взять вопросы по умолчанию"""
    if not path:
        return parse_questions(DEFAULT_QUESTIONS)

    questions_path = Path(path)
    if not questions_path.exists():
        raise ValueError(f"Файл вопросов не найден: {questions_path}")

    with questions_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or []

    # Допускаем как голый список, так и {"questions": [...]}
    if isinstance(raw, dict):
        raw = raw.get("questions", [])

    return parse_questions(raw)
