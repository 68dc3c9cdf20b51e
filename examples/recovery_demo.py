"""
Recovery demonstration for jsonheal.

This demo shows how jsonheal gets a usable structure back from output that an
LLM-driving process cut off or wrapped in chatter.
"""

import logging

from jsonheal import (
    UNRECOVERABLE,
    RecoveryConfig,
    RecoveryResult,
    UnrecoverableError,
    loads,
    recover,
    recover_detailed,
)


def print_result(title: str, result: RecoveryResult) -> None:
    """Helper function to print recovery results nicely."""
    print(f"\n{title}")
    print("=" * len(title))

    if result.ok:
        print(f"✅ Recovered: {result.value}")
        print(f"🔧 Phase: {result.phase.value if result.phase else '-'}")
        print(f"✂️  Trimmed: {result.stats.trimmed_chars} chars")
        print(f"➕ Appended: {result.stats.appended!r}")
    else:
        print(f"❌ Unrecoverable: {result.reason}")
    print(f"📊 Parse attempts: {result.stats.parse_attempts}")


def demo_phases() -> None:
    """Demonstrate each of the three recovery phases."""
    print("🚀 jsonheal Recovery Demo")
    print("=" * 24)

    print_result("Well-formed output", recover_detailed('{"status": "ok", "n": 3}'))
    print_result("Missing closers", recover_detailed('{"files": ["a.py", "b.py"'))
    print_result(
        "Truncated mid-string",
        recover_detailed('{"summary": "Done", "details": "The refactor touched'),
    )


def demo_failure_handling() -> None:
    """Demonstrate branching on failure instead of catching exceptions."""
    print("\n\nFailure handling")

    for output in ["42", "Error: rate limit exceeded", ""]:
        value = recover(output)
        if value is UNRECOVERABLE:
            print(f"   ❌ {output!r}: nothing structured, re-prompt the model")
        else:
            print(f"   ✅ {output!r}: {value}")

    try:
        loads("not json at all")
    except UnrecoverableError as e:
        print(f"   ⚠️  loads() raised: {e}")


def demo_wrapped_output() -> None:
    """Demonstrate opt-in extraction from markdown and prose."""
    chatty = 'Sure! Here is the plan:\n```json\n{"steps": ["lint", "test", "rel'

    print("\n\nWrapped output")
    print(f"   Default: {recover(chatty)!r}")
    print(f"   Lenient: {recover(chatty, RecoveryConfig.lenient())!r}")


def main() -> None:
    """Run all demonstrations."""
    logging.basicConfig(level=logging.INFO)
    demo_phases()
    demo_failure_handling()
    demo_wrapped_output()

    print("\n\n🎉 Recovery Demo Complete!")


if __name__ == "__main__":
    main()
