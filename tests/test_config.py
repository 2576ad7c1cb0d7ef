"""Тесты конфигурации"""
import pytest

from utils.config import load_settings, parse_chat_id, parse_ids
from utils.questions import DEFAULT_QUESTIONS, Question, load_questions, parse_questions


def test_parse_ids():
    assert parse_ids("1, 2,,3 ") == [1, 2, 3]
    assert parse_ids("") == []
    assert parse_ids("3,1,3,2,1") == [3, 1, 2]


def test_parse_chat_id():
    assert parse_chat_id("-100123") == -100123
    assert parse_chat_id("@team") == "@team"
    assert parse_chat_id(" ") is None


def test_default_questions():
    """Тест: без файла берутся вопросы по умолчанию"""
    questions = load_questions(None)
    assert len(questions) == len(DEFAULT_QUESTIONS)
    assert all(isinstance(q, Question) for q in questions)


def test_load_questions_from_yaml(tmp_path):
    """Тест: вопросы читаются из YAML в заданном порядке"""
    path = tmp_path / "questions.yaml"
    path.write_text(
        "questions:\n"
        "  - question: What did you do yesterday?\n"
        "    color: '#f08000'\n"
        "  - question: What will you do today?\n",
        encoding="utf-8",
    )

    questions = load_questions(str(path))

    assert questions == [
        Question(text="What did you do yesterday?", color="#f08000"),
        Question(text="What will you do today?", color=""),
    ]


def test_invalid_question_entry():
    with pytest.raises(ValueError):
        parse_questions([{"color": "#fff"}])
    with pytest.raises(ValueError):
        parse_questions("not a list")


def test_missing_questions_file(tmp_path):
    with pytest.raises(ValueError):
        load_questions(str(tmp_path / "missing.yaml"))


def test_load_settings(monkeypatch):
    """Тест: настройки из переменных окружения"""
    monkeypatch.setenv("BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TEAM_MEMBERS", "101,202")
    monkeypatch.setenv("TEAM_CHAT_ID", "-100500")
    monkeypatch.setenv("ADMIN_IDS", "101")
    monkeypatch.setenv("STANDUP_SCHEDULE", "0 30 9 * * 1-5")
    monkeypatch.setenv("BOT_LANG", "en")
    monkeypatch.delenv("QUESTIONS_FILE", raising=False)

    settings = load_settings()

    assert settings.bot_token == "123:abc"
    assert settings.team_members == [101, 202]
    assert settings.team_chat_id == -100500
    assert settings.admin_ids == [101]
    assert settings.schedule == "0 30 9 * * 1-5"
    assert settings.lang == "en"
    assert len(settings.questions) == len(DEFAULT_QUESTIONS)


def test_load_settings_requires_token(monkeypatch):
    """Тест: без BOT_TOKEN бот не запускается"""
    monkeypatch.delenv("BOT_TOKEN", raising=False)
    with pytest.raises(ValueError):
        load_settings()


def test_load_settings_requires_team_chat(monkeypatch):
    monkeypatch.setenv("BOT_TOKEN", "123:abc")
    monkeypatch.delenv("TEAM_CHAT_ID", raising=False)
    with pytest.raises(ValueError):
        load_settings()
