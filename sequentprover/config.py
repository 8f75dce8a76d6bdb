"""Shared constants for the command-line and GUI front-ends."""

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# Overrides the default log level (WARNING) when set, e.g. DEBUG.
LOG_LEVEL_ENV = "SEQUENTPROVER_LOG_LEVEL"

# LaTeX environment wrapping exported \infer derivations.
LATEX_ENV = "rules"

# --- CLI ---
PROMPT = "> "
BANNER = "Input a sequent to prove."
HINT = "Type :h for help, :q for quit"
HELP_TEXT = """\
Enter a sequent such as  A -> B, A |- B  and press Enter.

  Connectives:  !A (not)   A && B (and)   A || B (or)   A -> B (implies)
  Binary connectives share one precedence and group to the left,
  so  A && B || C  means  (A && B) || C.  Use parentheses to regroup.
  Either side of |- may be empty.

Commands:
  :h    show this help
  :q    quit"""

PROVABLE_MESSAGE = "This sequent is provable. The following is the proof figure."
UNPROVABLE_MESSAGE = "This sequent is unprovable."
EMPTY_INPUT_MESSAGE = "Please enter a sequent."

# --- GUI ---
APP_TITLE = "Sequent Prover"
WINDOW_GEOMETRY = "900x650"
DEFAULT_SEQUENT = "A -> B, A |- B"
MAIN_FONT = ("Segoe UI", 11)
MONO_FONT = ("Consolas", 11)
HEADER_FONT = ("Segoe UI", 12, "bold")
STATUS_FONT = ("Segoe UI", 9)
EXPORT_TITLE = "LaTeX Export"
EXPORT_GEOMETRY = "700x500"
COPIED_MESSAGE = "LaTeX code copied to clipboard."
