"""Timeclock package.

Organized by feature modules (events, sessions, reports, clock, sync) with a thin
Flask controller layer on top of service/repository layers. The session
reconstruction and reporting code is pure and takes the event sequence as its
only input.
"""
