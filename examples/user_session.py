#!/usr/bin/env python3
"""
Keep the current user in a session.

Runs on the in-memory stub backend, so it needs no web server:

    python examples/user_session.py
"""

import os
import sys
from dataclasses import dataclass

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sessionbox.logging_config import setup_logging
from sessionbox.modules.backend import SessionBackendStub
from sessionbox.modules.session import Session, SessionVariable


@dataclass
class User:
    name: str = "anonymous"


CURRENT_USER = SessionVariable("user", User)


def main():
    setup_logging("DEBUG")

    session = Session(SessionBackendStub())
    session.configure("the-session-name", ".example.com")
    session.start()

    if not CURRENT_USER.has(session):
        CURRENT_USER.set(session, User())

    print(f"has user: {CURRENT_USER.has(session)}")
    print(f"user: {CURRENT_USER.get(session)}")
    print(f"session id: {session.get_id()}")

    session.commit()


if __name__ == "__main__":
    main()
