"""
Namegen - Grammar-driven fictional name generator.

Loads grammar files in the libtcod namegen dialect and generates names
for characters, places and factions:
- Grammar parsing (named blocks of syllable/phoneme pools and rules)
- Weighted rule selection
- Token-based word building
- Rejection of words containing illegal substrings
"""

__version__ = "0.1.0"
