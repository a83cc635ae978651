"""Fixed Spanish lexicons used across the analysis pipeline."""

import re
import unicodedata


def _fold(word: str) -> str:
    """Strip combining marks so accented stopwords match normalized tokens."""
    decomposed = unicodedata.normalize("NFD", word)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


_STOPWORDS = (
    "de la y que el en los se del las por un para con no una su al lo como más pero "
    "sus le ya o este sí porque esta entre cuando muy sin sobre también me hasta hay "
    "donde quien desde todo nos durante todos uno les ni contra otros ese eso ante "
    "ellos e esto mí antes algunos qué unos yo otro otras otra él tanto esa estos "
    "mucho quienes nada muchos cual poco ella estar estas algunas algo nosotros mi "
    "mis tú te ti tu tus ellas nosotras vosostros vosostras os mío mía míos mías "
    "tuyo tuya tuyos tuyas suyo suya suyos suyas nuestro nuestra nuestros nuestras "
    "vuestro vuestra vuestros vuestras esos esas estoy estás está estamos estáis "
    "están esté estés estemos estéis estén estaré estarás estará estaremos estaréis "
    "estarán estaría estarías estaríamos estaríais estarían estaba estabas estábamos "
    "estabais estaban estuve estuviste estuvo estuvimos estuvisteis estuvieron "
    "estuviera estuvieras estuviéramos estuvierais estuvieran estuviese estuvieses "
    "estuviésemos estuvieseis estuviesen estando estado estada estados estadas estad"
).split()

SPANISH_STOPWORDS = frozenset(_STOPWORDS) | frozenset(_fold(w) for w in _STOPWORDS)

# Speaker labels such as "Entrevistador:" or "participante -"
INTERLOCUTOR_PATTERN = re.compile(
    r"(entrevistador|entrevistadora|moderador|participante|entrevistad[oa])\s*[:\-]",
    re.IGNORECASE,
)

POSITIVE_WORDS = frozenset([
    "bueno", "buena", "bien", "positivo", "positiva", "mejor", "mejora", "excelente",
    "útil", "satisfecho", "satisfecha", "satisfactorio", "favorable", "agradable",
    "aceptable", "fortaleza", "fortalezas", "beneficio", "beneficios", "apoyo",
    "oportunidad", "oportunidades", "eficiente", "eficaz", "claro", "claridad",
    "acierto", "logro", "avance",
])

NEGATIVE_WORDS = frozenset([
    "malo", "mala", "mal", "negativo", "negativa", "peor", "problema", "problemas",
    "insatisfactorio", "insatisfecho", "riesgo", "riesgos", "limitado", "limitada",
    "dificultad", "dificultades", "falla", "fallas", "débil", "debilidad",
    "debilidades", "crítica", "críticas", "pobre", "insuficiente", "carencia",
    "deficiente", "obstáculo", "obstaculos", "barrera", "barreras",
])

NEGATIONS = frozenset(["no", "nunca", "jamás", "ningún", "ninguna", "sin"])

EMERGENT_PREFIX = "Emergente"

COMPARATIVE_DIMENSIONS = (
    ("country", "Por país"),
    ("gender", "Por género"),
    ("age", "Por edad"),
    ("locality", "Por localidad"),
)
