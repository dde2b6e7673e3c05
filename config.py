"""
Simulation tuning knobs.
"""

# Population controls
MAX_NEURONS = 150
SEED_NEURONS = 50
CLICK_SPAWN_BATCH = 5
CLICK_SPAWN_JITTER = 20.0  # +/- pixels per axis around the click

# Neuron body + motion
NEURON_RADIUS_RANGE = (2.0, 4.0)
NEURON_START_SPEED = 0.1  # per-axis initial velocity range is +/- this
NEURON_MAX_SPEED = 0.2
VELOCITY_NUDGE_CHANCE = 0.01
VELOCITY_NUDGE = 0.05

# Activity / life
ACTIVITY_DECAY = 0.0005
MOUSE_ACTIVITY_BOOST = 0.005
CONNECT_ACTIVITY_BOOST = 0.5
CULL_ACTIVITY = 0.01
CULL_TOLERANCE = 1e-9  # absorbs float drift from repeated decay steps
MOUSE_INFLUENCE_RADIUS = 250.0

# Connection search
CONNECTION_DISTANCE = 150.0
CONNECTION_MIN_DISTANCE = 20.0
CONNECTION_MIN_ACTIVITY = 0.5
MAX_AXONS_FOR_SEARCH = 3  # searching stops once a neuron holds more than this
CONNECTION_SEARCH_CHANCE = 0.01

# Axon growth
GROWTH_SPEED = 0.5
GROWTH_JITTER = 0.4
AXON_MOUSE_RANGE = 400.0
AXON_MOUSE_WEIGHT = 0.5
AXON_CONNECT_DISTANCE = 10.0
AXON_MAX_LENGTH = 350  # path points before retraction begins

# Environment
SCREEN_W, SCREEN_H = 1280, 800
TARGET_FPS = 60

# Rendering
TRAIL_ALPHA = 0.1
NEURON_FILL_ALPHA = 0.8
NEURON_GLOW_RADIUS = 15.0
NEURON_GLOW_LAYERS = 4
AXON_ALPHA = 0.3
AXON_WIDTH = 1
