"""Default values for the fire spread and swarm suppression simulation."""

# --- Grid ---
GRID_WIDTH = 40
GRID_HEIGHT = 20
MAX_ELEVATION = 100.0
WIND = (1, 0)

# --- Fire spread ---
IGNITION_COOLDOWN = 3       # ticks before a freshly ignited cell can spread
SPREAD_COOLDOWN = 2         # ticks between two spread attempts of a burning cell
BURNOUT_PROBABILITY = 0.03
BASE_SPREAD_PROBABILITY = 0.05
ELEVATION_FACTOR = 0.003
WIND_BONUS = 0.08
MIN_SPREAD_PROBABILITY = 0.005
MAX_SPREAD_PROBABILITY = 0.4

# --- Agents ---
AGENT_COUNT = 20
AGENT_SPEED = 10.0
CELL_SIZE = 10
EXTINGUISH_TIME = 40
MAX_WATER_CAPACITY = 3
REFILL_TIME = 30
MAX_SUPPRESSIONS_PER_TICK = 3
INITIAL_VELOCITY_RANGE = 1.5

# --- PSO ---
OMEGA = 0.7
PHI_PERSONAL = 1.5
PHI_GLOBAL = 1.5

# --- Fitness landscape (lower is better) ---
OUT_OF_BOUNDS_PENALTY = 1e6
FIRE_FITNESS = -100.0
WATER_FITNESS = -10.0
BURNT_FITNESS = 1000.0
NO_FIRE_FITNESS = 100.0

# --- Orchestration ---
INITIAL_FIRES = 5
WATER_BLOBS = 3
SWARM_START_TICK = 10
REIGNITION_INTERVAL = 15
REIGNITION_PROBABILITY = 0.3
MIN_TICKS_BEFORE_STOP = 20

# --- Water blobs ---
BLOB_BORDER = 4
BLOB_MIN_STEPS = 15
BLOB_MAX_STEPS = 29
