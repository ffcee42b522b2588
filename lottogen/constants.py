MAIN_MIN, MAIN_MAX = 1, 45
PICK_MAIN = 6
ALL_MAIN = list(range(MAIN_MIN, MAIN_MAX + 1))

# 6 main numbers + bonus per history line
HISTORY_FIELDS = PICK_MAIN + 1
MAX_EXCLUDE = MAIN_MAX - PICK_MAIN

HISTORY_FILE = "recent_lotto_numbers.txt"
OUTPUT_FILE = "generated_lotto_numbers.txt"
DEFAULT_GAMES = 5
BAR_WIDTH = 50
BAR_CHAR = "█"
