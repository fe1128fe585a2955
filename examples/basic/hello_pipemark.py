"""Tokenize a short document and print every token."""

from pipemark import tokenize

for token in tokenize("Let |m x_1 |t for all x||, so.\n\n|section->\n"):
    print(token)
