"""Pytest configuration for FieldKit tests."""

import json

import pytest

from fieldkit.config import generate_config_template


@pytest.fixture
def hero_data():
    """A valid document using every field type."""
    return {
        "fields": [
            {
                "type": "text",
                "name": "title",
                "label": {"en": "Title", "ru": "Заголовок"},
                "required": True,
                "rules": "nullable|min:3|max:200",
            },
            {
                "type": "textarea",
                "name": "description",
                "label": {"en": "Description", "ru": "Описание"},
                "required": False,
                "rules": "nullable|max:1000",
            },
            {
                "type": "select",
                "name": "align",
                "label": {"en": "Alignment", "ru": "Выравнивание"},
                "required": False,
                "rules": "",
                "options": {
                    "values": ["left", "center", "right"],
                    "labels": [
                        {"en": "Left", "ru": "Слева"},
                        {"en": "Center", "ru": "По центру"},
                        {"en": "Right", "ru": "Справа"},
                    ],
                },
            },
            {"type": "colorpicker", "name": "background", "label": {"en": "Background", "ru": "Фон"}},
            {
                "type": "switch",
                "name": "show_button",
                "label": {"en": "Show button", "ru": "Показать кнопку"},
            },
            {
                "type": "file",
                "name": "image",
                "label": {"en": "Image", "ru": "Изображение"},
                "rules": "nullable|image",
                "accept": "image/*",
                "size": 2048,
            },
            {"type": "html", "name": "body", "label": {"en": "Body", "ru": "Текст"}},
        ],
        "default_data": {
            "title": "",
            "description": "",
            "align": "center",
            "background": "#ffffff",
            "show_button": True,
            "image": None,
            "body": "",
        },
    }


@pytest.fixture
def write_document(tmp_path):
    """Write a document to a JSON file and return its path."""

    def _write(data, name="fields.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point FIELDKIT_CONFIG at a fresh default config file."""
    path = tmp_path / "fieldkit.ini"
    path.write_text(generate_config_template(), encoding="utf-8")
    monkeypatch.setenv("FIELDKIT_CONFIG", str(path))
    return path
