"""
Cross-language completeness check.

For every global namespace record, compares each language's file of the same
name against the record and lists the keys the language lacks.
"""

from typing import Iterable, Iterator, List, Sequence

from .core.models import GlobalNamespaceRecord, Language, MissingKey, NamespaceReport
from .stack import KeyStack


def find_missing_keys(
    record: GlobalNamespaceRecord, language: Language
) -> List[MissingKey]:
    """
    Keys of ``record`` absent from the language's namespace of the same name.

    Returns an empty list when the language has no such namespace; a missing
    file is not the same thing as a file missing keys.
    """
    namespace = language.get_namespace(record.name)
    if namespace is None:
        return []
    return [
        MissingKey(namespace=record.name, language=language.name, key=key)
        for key in record.keys
        if key not in namespace.data
    ]


class CompletenessChecker:
    """
    Read-only view over a filled KeyStack and the loaded languages.

    Records are visited in namespace-name order, languages in load order.
    """

    def __init__(
        self,
        stack: KeyStack,
        languages: Sequence[Language],
        report_missing_namespaces: bool = False,
    ):
        self.stack = stack
        self.languages = tuple(languages)
        self.report_missing_namespaces = report_missing_namespaces

    def check_record(self, record: GlobalNamespaceRecord) -> NamespaceReport:
        report = NamespaceReport(name=record.name)
        for language in self.languages:
            if language.get_namespace(record.name) is None:
                if self.report_missing_namespaces:
                    report.absent_in.append(language.name)
                continue
            report.missing.extend(find_missing_keys(record, language))
        return report

    def iter_reports(self) -> Iterator[NamespaceReport]:
        for record in self.stack:
            yield self.check_record(record)

    def run(self) -> List[NamespaceReport]:
        return list(self.iter_reports())


def all_missing(reports: Iterable[NamespaceReport]) -> List[MissingKey]:
    """Flatten reports into one list of missing keys."""
    return [entry for report in reports for entry in report.missing]
