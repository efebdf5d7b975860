"""Tests for the field data model."""

import dataclasses

import pytest

from fieldkit.schema.core import (
    FIELD_CLASSES,
    FieldStructureDocument,
    FieldType,
    FileField,
    SelectField,
    SelectOptions,
    TextField,
)


class TestFieldType:
    """Test FieldType enum."""

    def test_names(self):
        assert FieldType.names() == ["text", "textarea", "select", "colorpicker", "switch", "file", "html"]

    def test_every_type_has_a_class(self):
        for field_type in FieldType:
            assert FIELD_CLASSES[field_type].field_type is field_type


class TestFieldDefinition:
    """Test field definitions."""

    def test_type_property(self):
        assert TextField(name="title", label={"en": "Title"}).type == "text"

    def test_label_for_language(self):
        field_def = TextField(name="title", label={"en": "Title", "ru": "Заголовок"})

        assert field_def.label_for("ru") == "Заголовок"
        assert field_def.label_for("de") == "Title"
        assert field_def.label_for() == "Title"
        assert field_def.languages == ("en", "ru")

    def test_label_for_falls_back_to_name(self):
        assert TextField(name="title", label={}).label_for("en") == "title"

    def test_fields_are_immutable(self):
        field_def = TextField(name="title", label={"en": "Title"})

        with pytest.raises(dataclasses.FrozenInstanceError):
            field_def.name = "other"
        with pytest.raises(TypeError):
            field_def.label["ru"] = "Заголовок"

    def test_label_is_copied(self):
        label = {"en": "Title"}
        field_def = TextField(name="title", label=label)
        label["ru"] = "Заголовок"

        assert "ru" not in field_def.label

    def test_file_accepted_types(self):
        assert FileField(name="f", label={"en": "F"}, accept="image/png, .pdf").accepted_types == ["image/png", ".pdf"]
        assert FileField(name="f", label={"en": "F"}).accepted_types == []


class TestSelectOptions:
    """Test select option arrays."""

    def test_aligned(self):
        assert SelectOptions(values=["a", "b"], labels=["A", "B"]).aligned
        assert not SelectOptions(values=["a", "b"], labels=["A"]).aligned

    def test_pairs_with_missing_label(self):
        options = SelectOptions(values=["a", "b"], labels=["A"])

        assert options.pairs() == [("a", "A"), ("b", None)]

    def test_select_defaults_to_no_options(self):
        assert SelectField(name="s", label={"en": "S"}).options.values == ()


class TestFieldStructureDocument:
    """Test document helpers."""

    def test_names_and_languages(self):
        document = FieldStructureDocument(
            fields=[
                TextField(name="title", label={"en": "Title"}),
                TextField(name="subtitle", label={"ru": "Подзаголовок", "en": "Subtitle"}),
            ],
            default_data={"title": "", "subtitle": ""},
        )

        assert document.names == ["title", "subtitle"]
        assert document.languages == ["en", "ru"]
        assert len(document) == 2
        assert isinstance(document.fields, tuple)

    def test_get_field(self):
        title = TextField(name="title", label={"en": "Title"})
        document = FieldStructureDocument(fields=(title,), default_data={"title": ""})

        assert document.get_field("title") is title
        assert document.get_field("missing") is None

    def test_default_data_is_read_only(self):
        document = FieldStructureDocument(fields=(), default_data={"title": ""})

        with pytest.raises(TypeError):
            document.default_data["title"] = "x"
