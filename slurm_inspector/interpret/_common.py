NA = "N/A"
DONT_CARE = "*"
ABSENT = "-"
PLACEHOLDERS = (NA, DONT_CARE, ABSENT, "")

U32_MAX = 2**32 - 1
