from .benchmark import VariantStats, compare_variants, format_report
