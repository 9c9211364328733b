"""
UMD Gym Status - Configuration
"""

API_URL = "http://recwell.umd.edu/wwwnet/formsite/api/count/GetAreaUsages"

# Venue we report on (exact, case-sensitive match on "title")
VENUE_TITLE = "ERC Weight Room"

# Head count treated as full
CAPACITY = 80

# Reasons that mean the room is shut when the count is zero
CLOSED_REASONS = ("Closed", "N/A")

# Request timeout in seconds (None = requests' default, no timeout)
REQUEST_TIMEOUT = None

# Refresh interval in minutes for --watch
REFRESH_INTERVAL = 5

# Button colors: (red, green, blue)
COLORS = {
    "gray": (128, 128, 128),
    "green": (0, 255, 0),
    "orange": (255, 165, 0),
    # UMD red, also the color before the first load
    "red": (224, 58, 62),
}

# Server "usage" value -> color name
USAGE_COLORS = {
    "Green": "green",
    "Orange": "orange",
    "Red": "red",
}

# Problem reports
REPORT_RECIPIENT = "cambernhardt@me.com"
REPORT_SUBJECT = "Problem with the UMD Gym app"
REPORT_BODY = ""

# Alert text
ALERT_TITLE = "Load Failed"
NETWORK_ERROR_MESSAGE = "Unable to load data from UMD. Check your network connection."
NOT_FOUND_MESSAGE = "The ERC weight room was not included in UMD's data. Was it renamed?"
GENERIC_ERROR_MESSAGE = "UMD's gym data could not be read. Try again later."
MAIL_ERROR_TITLE = "Could Not Send Email"
MAIL_ERROR_MESSAGE = (
    "Your device could not send e-mail. Please check e-mail configuration and try again."
)
