"""
Centralized Help Text Constants

CLI help text constants and exit codes shared by all subcommands.
"""

# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    VALIDATION_FAILED = 1
    NOTIFICATION_FAILED = 2
    INVALID_CONFIGURATION = 3


# Command help texts
REGISTER_HELP = "Validate a student, register them and notify observers of the room allocation."
DEMO_HELP = "Run the reference registration scenarios end to end."
CONFIG_HELP = "Inspect the effective configuration."
CONFIG_SHOW_HELP = "Print the merged configuration as YAML."

# Option help texts
NAME_HELP = "Student name (unique within a run)"
DISTANCE_HELP = "Distance from the hostel in domain units"
FEE_PAID_HELP = "Whether the hostel fee has been paid"
MIN_DISTANCE_HELP = "Minimum eligible distance from the hostel (overrides config)"
CONFIG_FILE_HELP = "Path to a YAML configuration file"
LOG_LEVEL_HELP = "Logging level (overrides config)"
