"""Shared fixtures for the thematic analyzer test suite."""

import logging
import sys

import pytest

from thematic_analyzer.config.settings import Settings
from thematic_analyzer.models.document import BaseCategory, Document, DocumentMeta

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
    force=True,
)

INTERVIEW_TEMUCO = """Entrevistador: ¿Cómo describe el acceso al agua potable en su comunidad?
Participante: El acceso al agua potable depende de camiones cisterna que llegan cada semana.
Muchas familias guardan agua en bidones porque el camión aljibe llega tarde.
En invierno los caminos rurales quedan cortados y nadie puede salir del sector.
Los jóvenes migran a la ciudad buscando empleo estable y mejores oportunidades.
Participante: La posta rural atiende solamente dos días por semana con un médico general.
"""

INTERVIEW_CUSCO = """Moderador: Cuéntenos sobre los servicios básicos del barrio.
Participante: El agua potable llega pocas horas durante la mañana y muchas familias compran bidones.
Los caminos rurales están en mal estado y el transporte público pasa muy poco.
Los jóvenes dejan el pueblo porque el empleo agrícola es temporal y mal pagado.
La posta rural no tiene medicamentos suficientes para atender a los adultos mayores.
"""

INTERVIEW_OSORNO = """Entrevistadora: ¿Qué problemas identifica en su localidad?
Participante: El transporte público rural tiene horarios muy limitados durante el invierno.
Los caminos rurales se inundan cuando llueve y los estudiantes pierden clases.
La cooperativa de agua potable rural administra un pozo profundo con problemas de presión.
Las mujeres organizan ferias campesinas para vender productos de la huerta familiar.
"""


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def interview_documents() -> list:
    """Three short interviews with partially filled metadata."""
    return [
        Document(
            id=1,
            name="temuco.txt",
            text=INTERVIEW_TEMUCO,
            meta=DocumentMeta(country="Chile", gender="mujer", age=42, locality="Temuco"),
        ),
        Document(
            id=2,
            name="cusco.txt",
            text=INTERVIEW_CUSCO,
            meta=DocumentMeta(country="Perú", gender="hombre", locality="Cusco"),
        ),
        Document(
            id=3,
            name="osorno.txt",
            text=INTERVIEW_OSORNO,
            meta=DocumentMeta(country="Chile", age=35),
        ),
    ]


@pytest.fixture
def base_categories() -> list:
    return [
        BaseCategory("Agua", ("potable", "bidones")),
        BaseCategory("Conectividad", ("caminos", "transporte")),
    ]
