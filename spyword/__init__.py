"""Spyword: a pass-the-device party game where one of you is the spy."""

VERSION = "1.0.0"
