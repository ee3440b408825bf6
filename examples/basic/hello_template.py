"""Tokenize a mustache template in 3 lines — zero config, zero deps."""

from bigote import tokenize

for token in tokenize("Hello {{#user}}{{& name}}{{/user}}!"):
    print(token)
