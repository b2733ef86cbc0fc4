# report.py

from utils import format_frames


def build_report(reference, frame_count, runs):
    """
    Plain-text export of a simulation: the inputs, then for every
    algorithm its totals and full step timeline.
    """
    lines = [
        "Page Replacement Algorithm Simulation Results",
        "================================================",
        f"Reference string: {', '.join(str(p) for p in reference)}",
        f"Frame count: {frame_count}",
        "",
    ]

    for run in runs:
        result = run.result
        lines.append(run.name)
        lines.append("--" * (len(run.name) // 2 + 6))
        lines.append(f"Page faults: {result.page_faults}")
        lines.append(f"Hit ratio: {result.hit_ratio:.2f}%")
        lines.append(f"Performance: {result.performance}")
        lines.append("Timeline:")
        for index, step in enumerate(result.steps, start=1):
            marker = "FAULT" if step.fault else "HIT"
            lines.append(
                f"  {index}. page {step.page} -> {format_frames(step.frames, frame_count)} :: {marker}"
            )
        lines.append("")

    return "\n".join(lines)


def report_filename(now):
    timestamp = now.isoformat().replace(":", "-").replace(".", "-")
    return f"page-replacement-results-{timestamp}.txt"
