#!/usr/bin/env python3
"""
Quick Start Guide for SSML Markup.

Parses a speech markup document, edits the tree, serializes it back and shows
how malformed input is reported.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ssml_markup import (
    Element,
    MalformedMarkupError,
    ParserConfig,
    SSMLProcessor,
    Text,
    parse,
    serialize,
)

DOCUMENT = (
    '<speak>Your order ships on '
    '<say-as interpret-as="date" format="md">10/1</say-as>.'
    '<break time="500ms"/>Tom &amp; Jerry say 3 &gt; 2.</speak>'
)


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - SSML Markup")
    print("=" * 45)

    # Step 1: Parse
    print("\n📄 Step 1: Parsing")
    print("-" * 30)
    tree = parse(DOCUMENT)
    say_as = tree.find("say-as")
    print(f"✅ Root <{tree.name}> with {len(tree.children)} children")
    print(f"📅 say-as interpret-as={say_as.get_attribute('interpret-as')!r}")
    print(f"🗣  Spoken text: {tree.text_content!r}")

    # Step 2: Transform the tree, then serialize
    print("\n✏️  Step 2: Transforming and serializing")
    print("-" * 30)
    tree.children.append(Element("emphasis", children=[Text("Thanks!")]))
    print(serialize(tree))

    # Step 3: Malformed input
    print("\n🔍 Step 3: Malformed input")
    print("-" * 30)
    processor = SSMLProcessor(ParserConfig.strict())
    for markup in ("<speak>unterminated", "<speak>x</p>", "<p a='1>x</p>"):
        try:
            processor.parse(markup)
        except MalformedMarkupError as e:
            print(f"❌ {markup!r}: {e.reason.name} at offset {e.offset}")


if __name__ == "__main__":
    quick_start_example()
