"""Tests for input records and the Analysis aggregate."""

import math

import pytest

from thematic_analyzer.models.analysis_result import (
    Analysis,
    CategoryGroup,
    FamiliarizationSummary,
    OpenCode,
    Quote,
    Theme,
)
from thematic_analyzer.models.document import BaseCategory, Document, DocumentMeta


class TestDocumentMeta:
    def test_spanish_aliases(self):
        meta = DocumentMeta.from_dict({"País": "Chile", "género": "mujer", "Ciudad": " Temuco ", "rol": "dirigenta"})
        assert meta == DocumentMeta(country="Chile", gender="mujer", locality="Temuco", role="dirigenta")

    def test_age_is_coerced(self):
        assert DocumentMeta.from_dict({"edad": "42"}).age == 42
        assert DocumentMeta.from_dict({"age": 35.0}).age == 35
        assert DocumentMeta.from_dict({"age": "adulta"}).age is None

    def test_missing_and_unknown_values_are_dropped(self):
        meta = DocumentMeta.from_dict({"country": math.nan, "gender": "  ", "color": "azul"})
        assert meta == DocumentMeta()
        assert DocumentMeta.from_dict(None) == DocumentMeta()

    def test_to_dict_omits_absent_fields(self):
        assert DocumentMeta(country="Perú", age=0).to_dict() == {"country": "Perú", "age": 0}

    def test_get_unknown_key(self):
        assert DocumentMeta(country="Chile").get("country") == "Chile"
        assert DocumentMeta().get("religion") is None


class TestDocument:
    def test_non_string_text_is_rejected(self):
        with pytest.raises(TypeError):
            Document(id=1, name="a.txt", text=None)

    def test_mapping_meta_is_coerced(self):
        document = Document(id=1, name="a.txt", text="hola", meta={"edad": 30})
        assert document.meta == DocumentMeta(age=30)
        assert document.to_dict() == {"id": 1, "name": "a.txt", "text": "hola", "meta": {"age": 30}}


class TestBaseCategory:
    def test_from_line(self):
        category = BaseCategory.from_line(" Salud | posta |  | Hospital ")
        assert category.label == "Salud"
        assert category.synonyms == ("posta", "Hospital")
        assert category.keys == ("salud", "posta", "hospital")

    def test_empty_label_is_rejected(self):
        with pytest.raises(ValueError):
            BaseCategory("  ")
        with pytest.raises(ValueError):
            BaseCategory.from_line(" | ")

    def test_blank_synonyms_are_dropped(self):
        assert BaseCategory("Agua", ("", "  ", "pozo")).synonyms == ("pozo",)


@pytest.fixture
def analysis():
    code_a = OpenCode("a.txt", "agua potable", "El agua potable llega tarde.")
    code_b = OpenCode("b.txt", "empleo", "No hay empleo para los jovenes.")
    return Analysis(
        docs=[Document(id=1, name="a.txt", text="x"), Document(id=2, name="b.txt", text="y")],
        familiarization=[FamiliarizationSummary("a.txt", "resumen", frequent_terms=["agua"])],
        open_codes=[code_a, code_b],
        grouped=[
            CategoryGroup("Agua", ["potable"], [code_a]),
            CategoryGroup("Emergente: empleo", codes=[code_b]),
        ],
        themes=[
            Theme("Agua", ["agua"], [Quote(code_a.quote, "a.txt")]),
            Theme("Emergente: empleo", ["empleo"], [Quote(code_b.quote, "b.txt")]),
        ],
    )


class TestAnalysis:
    def test_statistics(self, analysis):
        stats = analysis.get_statistics()
        assert stats["total_documents"] == 2
        assert stats["total_open_codes"] == 2
        assert stats["base_categories"] == 1
        assert stats["emergent_categories"] == 1
        assert stats["total_themes"] == 2

    def test_rename_updates_groups_and_themes_together(self, analysis):
        renamed = analysis.rename_category("Emergente: empleo", "Trabajo")
        assert renamed.get_categories() == ["Agua", "Trabajo"]
        assert [theme.theme for theme in renamed.themes] == ["Agua", "Trabajo"]
        assert renamed.get_theme("Trabajo").subthemes == ["empleo"]
        # The source aggregate is unchanged
        assert analysis.get_categories() == ["Agua", "Emergente: empleo"]
        assert analysis.get_theme("Trabajo") is None

    def test_rename_rejects_bad_labels(self, analysis):
        with pytest.raises(KeyError):
            analysis.rename_category("Salud", "Sanidad")
        with pytest.raises(ValueError):
            analysis.rename_category("Agua", "   ")
        with pytest.raises(ValueError):
            analysis.rename_category("Agua", "Emergente: empleo")

    def test_rename_to_same_label(self, analysis):
        assert analysis.rename_category("Agua", "Agua").get_categories() == ["Agua", "Emergente: empleo"]

    def test_remove_categories(self, analysis):
        trimmed = analysis.remove_categories(["Agua", "Inexistente"])
        assert trimmed.get_categories() == ["Emergente: empleo"]
        assert [theme.theme for theme in trimmed.themes] == ["Emergente: empleo"]
        assert len(trimmed.open_codes) == 2

    def test_to_dict_shape(self, analysis):
        data = analysis.to_dict()
        assert list(data) == ["docs", "familiarization", "openCodes", "grouped", "themes", "comparative"]
        assert data["openCodes"][0] == {"doc": "a.txt", "code": "agua potable", "quote": "El agua potable llega tarde."}
        assert data["grouped"][0]["synonyms"] == ["potable"]
        assert "synonyms" not in data["grouped"][1]
        assert data["familiarization"][0]["frequentTerms"] == ["agua"]
        assert data["themes"][1]["quotes"] == [{"text": "No hay empleo para los jovenes.", "doc": "b.txt"}]


class TestCategoryGroup:
    @pytest.mark.parametrize("label,expected", [
        ("Emergente: empleo", True),
        ("Emergente 2", True),
        ("Emergentes sociales", False),
        ("Agua", False),
    ])
    def test_is_emergent(self, label, expected):
        assert CategoryGroup(label).is_emergent is expected

    def test_emergent_group_serializes_without_synonyms(self):
        assert CategoryGroup("Emergente: empleo").to_dict() == {"category": "Emergente: empleo", "codes": []}
        assert CategoryGroup("Emergentes sociales", ["redes"]).to_dict()["synonyms"] == ["redes"]


class TestRenameSharedLabel:
    def test_every_group_and_theme_with_the_label_is_renamed(self):
        code_a = OpenCode("a.txt", "empleo", "Buscan empleo fuera del pueblo.")
        code_b = OpenCode("b.txt", "empleo", "El empleo agricola es temporal.")
        analysis = Analysis(
            grouped=[
                CategoryGroup("Emergente: empleo", codes=[code_a]),
                CategoryGroup("Emergente: empleo", codes=[code_b]),
            ],
            themes=[Theme("Emergente: empleo"), Theme("Emergente: empleo")],
        )
        renamed = analysis.rename_category("Emergente: empleo", "Trabajo")
        assert renamed.get_categories() == ["Trabajo", "Trabajo"]
        assert [theme.theme for theme in renamed.themes] == ["Trabajo", "Trabajo"]
        assert [group.codes for group in renamed.grouped] == [[code_a], [code_b]]
