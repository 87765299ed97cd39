#!/usr/bin/env python3
"""
Evaluate CLI - Score a user story against the rubric

Reads a story (plain text or JSON) or one of the stored category templates,
scores it, and writes an evaluation JSON plus a markdown report.

Usage:
    python evaluate.py --story stories/digest.txt --author Dana
    python evaluate.py --story stories/digest.json
    python evaluate.py --category API --template reference

Output:
    outputs/evaluations/{author}_{evaluator}_evaluation.json
    outputs/reports/{author}_{evaluator}_report.md
"""

import argparse
import json
import sys
from pathlib import Path

from story_scorer.evaluators import get_evaluator, list_evaluators
from story_scorer.evaluators.user_story import PASS_THRESHOLD, list_categories


def load_story(story_path: Path) -> dict:
    """Load a story document: .json with a 'story' key, anything else as plain text"""
    if story_path.suffix.lower() == '.json':
        with open(story_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict) or not isinstance(data.get('story', ''), str):
            raise ValueError("story JSON must be an object with a 'story' string")
        return data

    with open(story_path, 'r', encoding='utf-8') as f:
        return {'story': f.read()}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Score a user story against the rubric',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available evaluators: {', '.join(list_evaluators())}
Available categories: {', '.join(list_categories())}

Examples:
    # Score a story file
    python evaluate.py --story my_story.txt --author Dana

    # Score a JSON story ({{"author": ..., "category": ..., "story": ...}})
    python evaluate.py --story my_story.json

    # Score a stored template
    python evaluate.py --category Backend --template reference

    # Custom threshold and output directory
    python evaluate.py --story my_story.txt --threshold 80 --output ./my_outputs
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--story',
        help='Path to story file (.txt, or .json with a "story" key)'
    )
    source.add_argument(
        '--category',
        help=f'Score a stored template for this category: {", ".join(list_categories())}'
    )
    parser.add_argument(
        '--template',
        choices=['bad', 'reference'],
        default='bad',
        help='Which stored template to score with --category (default: bad)'
    )
    parser.add_argument(
        '--evaluator',
        default='user_story',
        choices=list_evaluators(),
        help=f'Evaluator to use: {", ".join(list_evaluators())}'
    )
    parser.add_argument(
        '--author',
        help='Author name for the report (default: from JSON, else Unknown)'
    )
    parser.add_argument(
        '--threshold',
        type=int,
        default=PASS_THRESHOLD,
        help=f'Pass threshold (default: {PASS_THRESHOLD})'
    )
    parser.add_argument(
        '--output',
        default='./outputs',
        help='Output directory base (default: ./outputs)'
    )

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    EvaluatorClass = get_evaluator(args.evaluator)
    evaluator = EvaluatorClass(pass_threshold=args.threshold)

    print(f"\n{'='*60}")
    print("LOADING STORY")
    print(f"{'='*60}")

    if args.story:
        story_path = Path(args.story)
        if not story_path.exists():
            print(f"ERROR: Story not found: {story_path}")
            sys.exit(1)
        try:
            story_data = load_story(story_path)
        except (json.JSONDecodeError, ValueError) as e:
            print(f"ERROR: Could not read story {story_path}: {e}")
            sys.exit(1)
        author = args.author or story_data.get('author', 'Unknown')
        print(f"Source: {story_path}")
    else:
        if args.category not in list_categories():
            print(f"ERROR: Unknown category: {args.category}. Available: {', '.join(list_categories())}")
            sys.exit(1)
        story_data = None
        author = args.author or f"{args.category}_{args.template}"
        print(f"Source: {args.category} template ({args.template})")

    print(f"Author: {author}")

    print(f"\n{'='*60}")
    print(f"EVALUATING with {args.evaluator.upper()}")
    print(f"{'='*60}")

    try:
        if story_data is not None:
            result = evaluator.evaluate(story_data)
        else:
            result = evaluator.evaluate_template(args.category, args.template)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    shown = result.breakdown.rounded()
    print(f"\n✓ Evaluation complete")
    print(f"  Structure: {shown['structure']}/30")
    print(f"  Acceptance criteria: {shown['acceptanceCriteria']}/25")
    print(f"  Clarity: {shown['clarity']}/25")
    print(f"  INVEST: {shown['invest']}/20")
    print(f"  Penalties: -{shown['penalties']}")
    print(f"  Score: {result.score}/100 ({'PASS' if result.passed else 'NOT YET'})")

    # Save evaluation
    output_base = Path(args.output)
    eval_dir = output_base / "evaluations"
    report_dir = output_base / "reports"
    eval_dir.mkdir(parents=True, exist_ok=True)
    report_dir.mkdir(parents=True, exist_ok=True)

    safe_name = str(author).replace(' ', '_')

    eval_path = eval_dir / f"{safe_name}_{args.evaluator}_evaluation.json"
    eval_data = {
        'author': author,
        'evaluator': args.evaluator,
        **result.to_dict()
    }

    with open(eval_path, 'w', encoding='utf-8') as f:
        json.dump(eval_data, f, indent=2)

    report_path = report_dir / f"{safe_name}_{args.evaluator}_report.md"
    with open(report_path, 'w', encoding='utf-8') as f:
        f.write(evaluator.generate_report(result, author))

    # Summary
    print(f"\n{'='*60}")
    print("EVALUATION COMPLETE")
    print(f"{'='*60}")
    print(f"Evaluation: {eval_path}")
    print(f"Report: {report_path}")

    return result


if __name__ == "__main__":
    main()
