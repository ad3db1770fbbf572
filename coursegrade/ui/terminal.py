"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the coursegrade package.

To create a different UI (web, GUI, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import EXPECTED_TOTAL_WEIGHT
from ..engines import resolve_criterion_score, total_weight
from ..models import AppState, Course, SemesterSummary


class TerminalDisplay:
    """
    Pretty terminal output for gradebook results.

    Every method takes already-computed data (models or a SemesterSummary)
    and only formats it. No grading happens here except resolving a
    criterion's displayed score.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BAR_WIDTH = 30

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def letter_color(cls, letter: str) -> str:
        """Green for A's fading to red for D's and F."""
        return {
            "A": cls.GREEN,
            "B": cls.CYAN,
            "C": cls.YELLOW,
            "D": cls.MAGENTA,
            "F": cls.RED,
        }.get(letter[:1], cls.DIM)

    @classmethod
    def print_load_error(cls, message: str):
        print(f"\n  {cls.YELLOW}⚠ {message}{cls.RESET}")
        print(f"  {cls.DIM}Starting with an empty gradebook. The file will be overwritten on the next save.{cls.RESET}")

    @classmethod
    def print_semester_list(cls, state: AppState):
        """Print every semester, marking the active one."""
        cls.print_header("SEMESTERS")

        if not state.semesters:
            print(f"\n  {cls.DIM}No semesters yet. Add one to get started!{cls.RESET}")
            return

        for i, semester in enumerate(state.semesters, 1):
            marker = f"{cls.GREEN}▸{cls.RESET}" if semester.id == state.active_semester_id else " "
            count = len(semester.courses)
            print(f"  {marker} {i}. {cls.BOLD}{semester.name}{cls.RESET} "
                  f"{cls.DIM}({count} course{'s' if count != 1 else ''}){cls.RESET}")

            if state.sidebar_collapsed:
                continue
            for course in semester.courses:
                print(f"        {cls.DIM}• {course.name} ({course.credits}cr){cls.RESET}")

    @classmethod
    def print_gpa_summary(cls, summary: SemesterSummary):
        """Print the GPA card with the per-course breakdown."""
        cls.print_header("SEMESTER GPA")

        print(f"\n  {cls.BOLD}GPA:{cls.RESET} {summary.gpa:.2f}")
        print(f"  {cls.BOLD}Credits:{cls.RESET} {summary.total_credits}")

        if not summary.courses:
            print(f"\n  {cls.DIM}No courses in this semester.{cls.RESET}")
            return

        print(f"\n  {cls.BOLD}{'#':<3} {'COURSE':<32} {'CR':>5} {'GRADE':>8} {'LETTER':>7}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 58}{cls.RESET}")

        for i, item in enumerate(summary.courses, 1):
            color = cls.letter_color(item.letter)
            print(f"  {i:<3} {item.name[:32]:<32} {item.credits:>5} {item.numeric_grade:>7.1f}% "
                  f"{color}{item.letter:>7}{cls.RESET}")
            if not item.weights_balanced:
                print(f"      {cls.DIM}└─ {cls.RED}weights total {item.total_weight:g}%"
                      f" (should be {EXPECTED_TOTAL_WEIGHT}%){cls.RESET}")

        if summary.unrecognized_letters:
            letters = ", ".join(summary.unrecognized_letters)
            print(f"\n  {cls.YELLOW}⚠ Not on the 4.0 table, counted as 0.0: {letters}{cls.RESET}")

    @classmethod
    def print_distribution(cls, summary: SemesterSummary):
        """
        Print the grade distribution as a horizontal bar chart.

        Bars are scaled to the most common letter.
        """
        cls.print_subheader("Grade Distribution")

        if not summary.distribution:
            print(f"  {cls.DIM}(none){cls.RESET}")
            return

        max_count = max(entry.count for entry in summary.distribution)
        for entry in summary.distribution:
            filled = round(entry.count / max_count * cls.BAR_WIDTH)
            bar = "█" * filled + "░" * (cls.BAR_WIDTH - filled)
            color = cls.letter_color(entry.letter)
            print(f"  {color}{entry.letter:<4}{cls.RESET} {color}{bar}{cls.RESET} "
                  f"{entry.count} ({entry.percentage:.0f}%)")

    @classmethod
    def print_course_detail(cls, course: Course, numeric_grade: float, letter: str):
        """Print one course card: criteria with sub-items, weight check and scale."""
        color = cls.letter_color(letter)
        cls.print_header(f"{course.name.upper()}  {color}{letter}{cls.RESET}{cls.BOLD}{cls.CYAN} ({numeric_grade:.1f}%)")
        print(f"  {cls.BOLD}Credits:{cls.RESET} {course.credits}")

        if course.collapsed:
            print(f"  {cls.DIM}(collapsed){cls.RESET}")
            return

        weights = total_weight(course.criteria)
        weight_color = cls.GREEN if weights == EXPECTED_TOTAL_WEIGHT else cls.RED
        note = "" if weights == EXPECTED_TOTAL_WEIGHT else f" (should be {EXPECTED_TOTAL_WEIGHT}%)"
        print(f"  {cls.BOLD}Total Weight:{cls.RESET} {weight_color}{weights:g}%{note}{cls.RESET}")

        cls.print_subheader("Criteria")
        if not course.criteria:
            print(f"  {cls.DIM}(none){cls.RESET}")

        for i, criterion in enumerate(course.criteria, 1):
            score = resolve_criterion_score(criterion)
            source = f" {cls.DIM}(avg of {len(criterion.sub_items)}){cls.RESET}" if criterion.sub_items else ""
            print(f"  {i:<3} {criterion.name[:30]:<30} {criterion.weight:>6g}%  {score:>6.1f}%{source}")
            for j, item in enumerate(criterion.sub_items or (), 1):
                print(f"        {cls.DIM}{j}. {item.name[:26]:<26} {item.score:>6g}%{cls.RESET}")

        cls.print_subheader("Grade Scale")
        ordered = sorted(course.grade_scale, key=lambda entry: entry.min, reverse=True)
        cells = [f"{cls.letter_color(e.letter)}{e.letter}{cls.RESET} ≥{e.min:g}" for e in ordered]
        for start in range(0, len(cells), 5):
            print("  " + "   ".join(cells[start:start + 5]))
