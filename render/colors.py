"""
neuron_canvas module: render/colors.py

Central color palette.
"""

BG = (0, 0, 0)

NEURON = (180, 220, 255)
GLOW = (100, 200, 255)
AXON = (180, 220, 255)

HUD_TEXT = (235, 235, 235)
