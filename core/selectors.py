#!/usr/bin/env python3
"""
Structural queries for Duden pages, compiled once at import time.
"""

import soupsieve as sv

# Entry page
TITLE = sv.compile("h1 > span")
MEANINGS = sv.compile("#bedeutungen .enumeration__item")
SUB_MEANINGS = sv.compile(".enumeration__sub-item")
MEANING_TEXT = sv.compile(".enumeration__text")
EXAMPLES_NOTE = sv.compile('dl.note:has(> dt.note__title:-soup-contains("Beispiel"))')
NOTE_ITEMS = sv.compile("li")
SINGLE_MEANING = sv.compile("#bedeutung p")

# Key/value attribute blocks, e.g. "Gebrauch: umgangssprachlich"
TUPLE = sv.compile("dl.tuple")
TUPLE_KEY = sv.compile(".tuple__key")
TUPLE_VALUE = sv.compile(".tuple__val")

# Search results page
VIGNETTE = sv.compile(".vignette")
VIGNETTE_WORD = sv.compile("strong")
VIGNETTE_LINK = sv.compile("a.vignette__label")
VIGNETTE_SNIPPET = sv.compile(".vignette__snippet")
