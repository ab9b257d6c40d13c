import logging

from wordcount.config import Settings, get_settings
from wordcount.errors import PassageUnreadableError
from wordcount.report import render_report
from wordcount.services.analysis import PassageAnalyzer

logger = logging.getLogger(__name__)


def main(settings: Settings | None = None) -> int:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    analyzer = PassageAnalyzer(top_k=settings.top_k)
    try:
        report = analyzer.analyze_file(settings.passage_path, encoding=settings.encoding)
    except PassageUnreadableError as error:
        print(error)
        return 0

    for line in render_report(report, top_k=settings.top_k):
        print(line)
    logger.debug("Finished report for %s", report.source)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
