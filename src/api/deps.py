"""
Service wiring for the API.

One KeyValueStore, one Session and the services built on them are shared by
every request of the process. The session is restored from the store the
first time the services are requested.
"""

from dataclasses import dataclass
from functools import lru_cache

from django.conf import settings

from src.accounts.service import AuthService
from src.accounts.session import Session
from src.compositions.service import CompositionService
from src.generation.client import CompositionGenerator
from src.store.store import KeyValueStore


@dataclass
class Services:
    store: KeyValueStore
    session: Session
    auth: AuthService
    compositions: CompositionService
    generator: CompositionGenerator


@lru_cache(maxsize=1)
def get_services() -> Services:
    store = KeyValueStore()
    session = Session(store)
    session.restore()
    return Services(
        store=store,
        session=session,
        auth=AuthService(store, session),
        compositions=CompositionService(store),
        generator=CompositionGenerator(
            enable_tracing=getattr(settings, "GENERATION_TRACING", True),
        ),
    )
