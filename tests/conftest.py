"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient, APIRequestFactory

from eventos.stores import InMemoryEventStore, get_event_store


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def request_factory() -> APIRequestFactory:
    return APIRequestFactory()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture(autouse=True)
def reset_default_store():
    get_event_store.cache_clear()
    yield
    get_event_store.cache_clear()


@pytest.fixture
def festival_payload() -> dict:
    return {
        "titulo": "Festival Gastronômico do Centro",
        "cat": "Gastronomia",
        "data": "2025-09-20",
        "hora": "18:00",
        "local": "Rua Ponciano, Centro",
        "preco": "Gratuito",
        "img": "https://douradosagora.com.br/media/posts/390241/dourados-tera-neste-sabado-balaio-festival-com-musica-arte-gastronomia-e-cultura-17522582977313.jpg",
        "desc": "Barracas, food trucks e música ao vivo com artistas locais.",
    }


@pytest.fixture
def invalid_payload() -> dict:
    return {
        "titulo": "",
        "cat": "",
        "data": "20-25-09-20",
        "hora": "",
        "local": "",
        "preco": "",
        "img": "douradosagora.com.br@media/posts/390241/dourados-tera-neste-sabado-balaio-festival-com-musica-arte-gastronomia-e-cultura-17522582977313.jpg",
        "desc": "",
    }
