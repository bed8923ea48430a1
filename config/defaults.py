"""Default configuration constants for the Desk Move Planner."""

# Clustering score weights (per unordered pair of same-department desks in a zone)
ADJACENT_PAIR_SCORE = 3     # Within one row and one column of each other
SAME_ZONE_PAIR_SCORE = 1    # Same zone, not adjacent

# Greedy swap refinement cap
MAX_REFINE_ITERATIONS = 200

# Employees in this department never count toward clustering
UNKNOWN_DEPARTMENT = "Unknown"

# Label used for a missing origin/destination in a move plan
UNASSIGNED_LABEL = "Unassigned"

# Optimization modes
OPTIMIZATION_MODES = ["minimize-moves", "full"]
DEFAULT_OPTIMIZATION_MODE = "minimize-moves"

# Department display colors
DEPARTMENT_COLORS = {
    "Engineering": "#3b82f6",
    "Design": "#a855f7",
    "Marketing": "#f97316",
    "Sales": "#10b981",
    "HR": "#ec4899",
    "Finance": "#eab308",
    "Product": "#06b6d4",
    "Operations": "#6366f1",
    UNKNOWN_DEPARTMENT: "#6b7280",
}
DEFAULT_DEPARTMENT_COLOR = "#6b7280"

# Values accepted as "yes" in Pinned / Unavailable upload columns
TRUTHY_FLAGS = {"yes", "y", "true", "1", "x"}

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_department_color(department: str, custom_colors: dict = None) -> str:
    if custom_colors and custom_colors.get(department):
        return custom_colors[department]
    return DEPARTMENT_COLORS.get(department, DEFAULT_DEPARTMENT_COLOR)
