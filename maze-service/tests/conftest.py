import pytest

FIRST_EXAMPLE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

SECOND_EXAMPLE = """\
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
"""

# two mirror-image routes of equal cost around a central wall
LOOP = """\
#####
#...#
#S#E#
#...#
#####
"""

CORRIDOR = "S..E\n"

WALLED_OFF = """\
#####
#S#E#
#####
"""


@pytest.fixture
def first_example() -> str:
    return FIRST_EXAMPLE


@pytest.fixture
def second_example() -> str:
    return SECOND_EXAMPLE


@pytest.fixture
def loop() -> str:
    return LOOP


@pytest.fixture
def corridor() -> str:
    return CORRIDOR


@pytest.fixture
def walled_off() -> str:
    return WALLED_OFF
