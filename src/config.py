WIDTH = 1280
HEIGHT = 720
FULLSCREEN = False
FPS = 60
VSYNC = False
BACKGROUND = (0.05, 0.05, 0.07, 1.0)
# Dungeon layout
TILE_SIZE = 32
MAP_COLS = 80
MAP_ROWS = 60
WALL_DENSITY = 0.18  # chance for an interior tile to be a wall
MAP_SEED = 1337
SPAWN_CLEAR_RADIUS = 3  # tiles kept free around the spawn point
# Player
PLAYER_SPEED = 160.0  # pixels per second
PLAYER_SIZE = 20
# Darkness defaults (the command layer bounds are in lighting/commands.py)
DARKNESS_ENABLED = False
LIGHT_RADIUS = 100
DARKNESS_OPACITY = 245
GRADIENT_WIDTH = 40
# More steps = smoother edge, at one extra circle per step per frame
GRADIENT_STEPS = 10
# Light sits this many pixels above the player's feet (head / lantern height)
LIGHT_OFFSET_Y = 24
DARKNESS_COLOR = (0.0, 0.0, 0.0)  # RGB in 0..1
CIRCLE_SEGMENTS = 64
# Logging
LOG_LEVEL = "INFO"
DARKNESS_DEBUG = False  # log every command and mutator call
