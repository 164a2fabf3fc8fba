import sys
from pathlib import Path

# Ensure we import the repo-local tokendiff (not a pip-installed one).
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from tokendiff import (  # noqa: E402
    convert_changes_to_xml,
    diff_custom_words,
    diff_custom_words_with_space,
    set_boundary_pattern,
)

PAIRS = [
    ("(VO) gamal", "(VO)(ON) gamal"),
    ("(ON) gamal", "(ON)(OFF) gamal"),
    ("New Value  ", "New  ValueMoreData "),
]


def main():
    for label, pattern in (("default", None), ("dialogue", r"(\(VO\)|\(ON\)|\(OFF\)|\s+|\b)")):
        set_boundary_pattern(pattern)
        print("==", label)
        for before, after in PAIRS:
            print("words:     ", convert_changes_to_xml(diff_custom_words(before, after)))
            print("with space:", convert_changes_to_xml(diff_custom_words_with_space(before, after)))


if __name__ == "__main__":
    main()
