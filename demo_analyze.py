#!/usr/bin/env python3
"""
Kendall Posture - Two-View Analysis Demo
Detects pose landmarks in a frontal and a sagittal photograph, runs the
posture analysis and prints the result as JSON.

Usage: python demo_analyze.py front.jpg side.jpg [--estimator geometry] [--output result.json]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from Posture_Engine.core.analysis_orchestrator import PostureAnalyzer
from Posture_Engine.core.estimators import LandmarkGeometryEstimator, PlaceholderEstimator
from Posture_Engine.detectors.pose_detector import PoseDetector, PoseNotDetectedError

ESTIMATORS = {
    'placeholder': PlaceholderEstimator,
    'geometry': LandmarkGeometryEstimator,
}


def parse_args():
    parser = argparse.ArgumentParser(description="Kendall Posture two-view analysis")
    parser.add_argument("frontal", type=Path, help="Frontal (front-facing) image")
    parser.add_argument("sagittal", type=Path, help="Sagittal (side-view) image")
    parser.add_argument("--estimator", "-e", choices=sorted(ESTIMATORS), default="placeholder",
                        help="Source of the estimated regional measurements")
    parser.add_argument("--output", "-o", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "=" * 50, file=sys.stderr)
    print("  Kendall Posture - Two-View Analysis", file=sys.stderr)
    print("  Distances are pixel-space approximations", file=sys.stderr)
    print("=" * 50 + "\n", file=sys.stderr)

    print("   Loading detector...", file=sys.stderr)
    try:
        with PoseDetector() as detector:
            print(f"   Detecting frontal view: {args.frontal}", file=sys.stderr)
            frontal = detector.detect_file(args.frontal)
            print(f"   Detecting sagittal view: {args.sagittal}", file=sys.stderr)
            sagittal = detector.detect_file(args.sagittal)
    except (FileNotFoundError, PoseNotDetectedError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"   Confidence: frontal {frontal.confidence:.2f}, sagittal {sagittal.confidence:.2f}",
          file=sys.stderr)

    analyzer = PostureAnalyzer(ESTIMATORS[args.estimator]())
    result = analyzer.analyze(frontal, sagittal)

    print(f"   Primary dysfunction: {result.primary_dysfunction}", file=sys.stderr)
    if result.metrics.unmeasured:
        print(f"   Not measured (landmarks not visible): {', '.join(result.metrics.unmeasured)}",
              file=sys.stderr)

    payload = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(payload, encoding="utf-8")
        print(f"Saved to {args.output}", file=sys.stderr)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
