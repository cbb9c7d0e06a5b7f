from . import format_diagnostic, parse_scene, print_scene

DEMO = """
# triangle with a dangling reference
point(10, 20, A)
point(30, 40, B)
line(A, B)
line(B, C)
point(50, 10, C)
line(C, D)
line(0, 0, 60, 60)
circle(1, 2)
"""


def run():
    scene, diagnostics = parse_scene(DEMO)
    print(f"Parsed scene: {scene}\n")

    print("Diagnostics:")
    if diagnostics:
        for diag in diagnostics:
            print(f"  - {format_diagnostic(diag)}")
    else:
        print("  (none)")

    print(f"Canonical scene:\n{print_scene(scene)}")


if __name__ == "__main__":
    run()
