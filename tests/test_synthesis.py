"""Tests for thematic and comparative synthesis."""

from thematic_analyzer.core.synthesis import synthesize_comparison, synthesize_themes
from thematic_analyzer.models.analysis_result import CategoryGroup, OpenCode, Quote
from thematic_analyzer.models.document import Document, DocumentMeta


def doc(name, **meta):
    return Document(id=0, name=name, text="", meta=DocumentMeta(**meta))


class TestSynthesizeThemes:
    def test_subthemes_from_group_quotes(self):
        group = CategoryGroup("Agua", codes=[
            OpenCode("a.txt", "agua", "agua potable escasa"),
            OpenCode("b.txt", "agua", "agua potable"),
        ])
        theme = synthesize_themes([group])[0]
        assert theme.theme == "Agua"
        assert theme.subthemes == ["agua", "agua potable", "potable", "potable escasa"]
        assert theme.quotes == [Quote("agua potable escasa", "a.txt"), Quote("agua potable", "b.txt")]

    def test_quotes_capped_in_insertion_order(self):
        codes = [OpenCode(f"d{i}.txt", "agua", f"cita numero {i} sobre agua") for i in range(12)]
        theme = synthesize_themes([CategoryGroup("Agua", codes=codes)])[0]
        assert len(theme.quotes) == 8
        assert [quote.doc for quote in theme.quotes] == [f"d{i}.txt" for i in range(8)]
        assert len(theme.subthemes) <= 4

    def test_one_theme_per_non_empty_group(self):
        groups = [
            CategoryGroup("Vacia"),
            CategoryGroup("Emergente: empleo", codes=[OpenCode("a.txt", "empleo", "empleo juvenil")]),
        ]
        assert [theme.theme for theme in synthesize_themes(groups)] == ["Emergente: empleo"]


class TestSynthesizeComparison:
    def test_compares_buckets_with_two_or_more_values(self):
        documents = [
            doc("chile.txt", country="Chile", gender="mujer"),
            doc("peru.txt", country="Perú", gender="mujer"),
        ]
        codes = [
            OpenCode("chile.txt", "agua potable", "q1"),
            OpenCode("chile.txt", "agua potable", "q2"),
            OpenCode("peru.txt", "empleo juvenil", "q3"),
        ]
        findings = synthesize_comparison(documents, codes)
        assert len(findings) == 1
        assert findings[0].dimension == "Por país"
        assert findings[0].findings == (
            "Chile: agua, agua potable, potable — Perú: empleo, empleo juvenil, juvenil"
        )

    def test_bucket_without_codes_reports_placeholder(self):
        documents = [doc("a.txt", locality="Temuco"), doc("b.txt", locality="Cusco")]
        codes = [OpenCode("a.txt", "caminos rurales", "q")]
        findings = synthesize_comparison(documents, codes)
        assert findings[0].dimension == "Por localidad"
        assert findings[0].findings.endswith("Cusco: —")

    def test_age_zero_is_a_value_and_missing_age_is_skipped(self):
        documents = [doc("a.txt", age=0), doc("b.txt", age=30), doc("c.txt")]
        findings = synthesize_comparison(documents, [])
        assert [f.dimension for f in findings] == ["Por edad"]
        assert findings[0].findings == "0: — — 30: —"

    def test_buckets_keep_first_seen_order(self):
        documents = [doc("a.txt", gender="mujer"), doc("b.txt", gender="hombre"), doc("c.txt", gender="mujer")]
        findings = synthesize_comparison(documents, [])
        assert findings[0].findings == "mujer: — — hombre: —"

    def test_no_metadata(self):
        assert synthesize_comparison([doc("a.txt"), doc("b.txt")], []) == []
        assert synthesize_comparison([], []) == []
