from models.employee import Employee
from models.layout import Desk, Zone, generate_desks
from models.seating import SeatingMap, SeatingSnapshot
from models.move_plan import MoveKind, MovePlan, MovePlanSummary, MoveStep
