"""
Version information for the railway conflict resolver.

Centralized version management for the application and its resolution
policies.
"""

# Core application information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "RailwayConflicts"
__app_display_name__ = "Railway Conflicts - Platform Booking Conflict Resolver"
__description__ = "Resolves platform conflicts between train bookings"

# Feature information
__features__ = [
    "Validated stations, lines and platforms",
    "Priority resolution (Stoppage over Through, later arrival cancelled)",
    "Detection-only conflict reporting",
    "Accessibility-aware platform checks",
    "JSON bookings input and configuration",
]

# Resolution policies
__policies__ = ["priority", "detection"]
__default_policy__ = "priority"

__python_version_required__ = "3.9+"
__license__ = "GPL v3"


def get_version_string() -> str:
    """Get formatted version string."""
    return f"{__app_name__} v{__version__}"


def get_full_version_info() -> str:
    """Get comprehensive version information."""
    return f"""
{__app_display_name__}
Version: {__version__}
Policies: {', '.join(__policies__)} (default: {__default_policy__})
"""
