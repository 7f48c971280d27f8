"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List

from reality_stats.data.gateway import InMemoryShowGateway
from reality_stats.data.models import Broadcaster, Participant, Prize, Show
from reality_stats.data.normalizer import ShowNormalizer
from reality_stats.engine import ReportEngine


@pytest.fixture
def raw_shows() -> List[Dict[str, Any]]:
    """Sample snapshot in the upstream document format."""
    return [
        {
            "nome": "Big Brother Brasil",
            "emissora": {"nome": "Globo", "pontos_audiencia": 82},
            "participantes": [
                {
                    "nome": "Juliette",
                    "idade": 31,
                    "premios": [
                        {"descricao": "Grande premio", "valor": 1500000, "data_recebimento": "2021-05-04"},
                        {"descricao": "Carro", "valor": 80000, "data_recebimento": "2021-03-10"},
                    ],
                },
                {
                    "nome": "Gil",
                    "idade": 29,
                    "premios": [
                        {"descricao": "Prova do lider", "valor": 50000, "data_recebimento": "2021-04-01"},
                    ],
                },
                {"nome": "Camilla", "idade": 27, "premios": None},
            ],
        },
        {
            "nome": "A Fazenda",
            "emissora": {"nome": "Record", "pontos_audiencia": 65},
            "participantes": [
                {
                    "nome": "Jojo",
                    "idade": 30,
                    "premios": [
                        {"descricao": "Premio final", "valor": 1500000, "data_recebimento": "2021-12-16"},
                    ],
                },
                {"nome": "Rico", "idade": 19, "premios": []},
                {"nome": "Dayane", "idade": 38},
            ],
        },
        {
            "nome": "Ilha Record",
            "emissora": {"nome": "Record", "pontos_audiencia": 65},
            "participantes": [
                {
                    "nome": "Nadja",
                    "idade": 36,
                    "premios": [
                        {"descricao": "Premio final", "valor": 500000, "data_recebimento": "2021-09-23"},
                    ],
                },
            ],
        },
        {
            "nome": "Casa de Verao",
            "emissora": {"nome": "SBT", "pontos_audiencia": 40},
            "participantes": [],
        },
    ]


@pytest.fixture
def shows(raw_shows) -> List[Show]:
    """Sample snapshot normalized to Show models."""
    return ShowNormalizer().normalize_shows(raw_shows)


@pytest.fixture
def gateway(shows) -> InMemoryShowGateway:
    """In-memory gateway over the sample snapshot."""
    return InMemoryShowGateway(shows)


@pytest.fixture
def engine(gateway) -> ReportEngine:
    """Report engine over the sample snapshot."""
    return ReportEngine(gateway)


@pytest.fixture
def make_show():
    """Factory for small shows: participants given as (name, age, [prize values])."""
    def _make_show(name="X", broadcaster="Globo", audience_points=80, participants=()):
        return Show(
            name=name,
            broadcaster=Broadcaster(name=broadcaster, audience_points=audience_points),
            participants=tuple(
                Participant(
                    name=p_name,
                    age=age,
                    prizes=tuple(
                        Prize(description=f"{p_name} prize {i}", value=value, date_received="2024-01-01")
                        for i, value in enumerate(values, start=1)
                    ),
                )
                for p_name, age, values in participants
            ),
        )
    return _make_show
