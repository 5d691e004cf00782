"""How the warden communicates: the law first, then the verdict."""

from indent_warden._laws import LAWS, VETTED_MARK


def print_laws():
    """State the law before enforcing it. No secret rules."""
    print("Laws:")
    for i, law in enumerate(LAWS, 1):
        print(f"  {i}. {law}")
    print()


# Indent findings first: they are the rule. Parse failures are files the
# rule never got to see, so they come last and cannot be vetted away.
_SECTIONS = [
    ("indent", "Nested control blocks"),
    ("parse", "Could not parse"),
]


def print_report(violations, vetted):
    """One section per rule for unvetted findings, then the vetted ones.
    Everything is visible. --strict only counts unvetted."""
    if not violations and not vetted:
        print("No violations found.")
        return

    for rule, title in _SECTIONS:
        details = [detail for r, detail in violations if r == rule]
        if not details:
            continue
        print(f"\n{title} ({len(details)}):")
        for detail in details:
            print(f"  {detail}")

    if violations:
        print(f"\n{len(violations)} violation(s)")
        if any(rule == "indent" for rule, _ in violations):
            print(f"To vet a nested-block finding: add '// {VETTED_MARK}' to the first 10 lines of the file.")

    # Reviewed and accepted. Still shown, but won't block CI.
    if vetted:
        print(f"\n--- vetted ({len(vetted)}) ---")
        for _, detail in vetted:
            print(f"  {detail}")

    if not violations:
        print("No unvetted violations.")
