from .constants import BAR_WIDTH, BAR_CHAR


def frequency_lines(table):
    return [f"{n:2d}: {c} times" for n, c in table.items()]


def bar_length(count, max_count, width=BAR_WIDTH):
    if max_count <= 0:
        return 0
    # round half up, never longer than width
    return min(width, int(count * width / max_count + 0.5))


def frequency_bar_lines(table, width=BAR_WIDTH):
    """ASCII bar chart scaled so the most frequent number gets ``width`` chars."""
    mx = table.max_count()
    return [f"{n:2d}: {c:3d} | {BAR_CHAR * bar_length(c, mx, width)}"
            for n, c in table.items()]


def print_frequencies(table):
    print("\n--- Frequency per number ---")
    for line in frequency_lines(table):
        print(line)


def print_frequency_bars(table, width=BAR_WIDTH):
    print("\n--- Frequency per number (bar chart) ---")
    for line in frequency_bar_lines(table, width):
        print(line)
