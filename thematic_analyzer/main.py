"""Main CLI interface for the Thematic Analyzer."""

import argparse
import logging
import sys
from typing import Optional

from thematic_analyzer.core.analyzer import ThematicAnalyzer
from thematic_analyzer.config.settings import Settings


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Thematic Analyzer - open coding, categories and themes for interview transcripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a folder of transcripts
  thematic-analyzer analyze transcripts/

  # With base categories and metadata
  thematic-analyzer analyze transcripts/ -c categorias.txt -m metadatos.csv

  # Reproducible emergent categories
  thematic-analyzer analyze transcripts/ --seed 42
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze transcripts')
    analyze_parser.add_argument('inputs', nargs='+',
                               help='Transcript files (.txt) or directories containing them')
    analyze_parser.add_argument('-c', '--categories',
                               help='Base categories file, one "label | synonym | ..." per line')
    analyze_parser.add_argument('-m', '--metadata',
                               help='Metadata table (.csv, .xlsx) with a "name" column')
    analyze_parser.add_argument('-o', '--output-dir',
                               help='Directory for report files')
    analyze_parser.add_argument('--seed', type=int,
                               help='Random seed for emergent clustering')
    analyze_parser.add_argument('--report-title', default='Análisis temático',
                               help='Title for the report')
    analyze_parser.add_argument('--no-excel', action='store_true',
                               help='Only write the JSON report')
    analyze_parser.add_argument('--progress', action='store_true',
                               help='Show a progress bar over documents')

    # Config command
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='config_action')
    config_subparsers.add_parser('show', help='Show current configuration')

    # Global options
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       default='INFO', help='Logging level')
    parser.add_argument('--log-file', help='Log file path')
    parser.add_argument('--env-file', help='Environment file path')

    return parser


def command_analyze(args, settings: Settings):
    """Handle analyze command."""
    print(f"Starting analysis of {len(args.inputs)} input(s)...")

    try:
        # Override settings with command-line arguments
        if args.output_dir:
            settings.output_dir = args.output_dir
        if args.seed is not None:
            settings.random_seed = args.seed

        analyzer = ThematicAnalyzer(settings=settings, show_progress=args.progress)
        analysis = analyzer.analyze_files(
            input_paths=args.inputs,
            categories_file=args.categories,
            metadata_file=args.metadata
        )

        stats = analysis.get_statistics()
        print("\n📊 Analysis Summary:")
        print(f"  • Documents processed: {stats['total_documents']}")
        print(f"  • Open codes: {stats['total_open_codes']} ({stats['unique_codes']} unique)")
        print(f"  • Categories: {stats['total_categories']} "
              f"({stats['base_categories']} base, {stats['emergent_categories']} emergent)")
        print(f"  • Comparative dimensions: {stats['comparative_dimensions']}")

        summary = analyzer.get_analysis_summary()
        if summary['top_categories']:
            print("\n🏷️  Top Categories:")
            for i, item in enumerate(summary['top_categories'], 1):
                theme = analysis.get_theme(item['name'])
                subthemes = ", ".join(theme.subthemes) if theme else ""
                print(f"  {i}. {item['name']} ({item['codes']} codes) {subthemes}")

        for finding in analysis.comparative:
            print(f"\n🔎 {finding.dimension}: {finding.findings}")

        report_files = analyzer.generate_report(args.report_title, write_excel=not args.no_excel)
        print("\nReports generated:")
        for report_type, file_path in report_files.items():
            print(f"  • {report_type.upper()}: {file_path}")

        print("\n🎉 Analysis completed successfully!")
        return 0

    except Exception as e:
        print(f"❌ Analysis failed: {str(e)}")
        logging.error(f"Analysis error: {str(e)}", exc_info=True)
        return 1


def command_config(args, settings: Settings):
    """Handle config command."""
    if args.config_action == 'show':
        print("⚙️  Current Configuration:")
        for name, value in settings.to_dict().items():
            print(f"  • {name}: {value}")
        return 0

    return 0


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    setup_logging(args.log_level, args.log_file)

    # Show help if no command specified
    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env(args.env_file)
        settings.validate()

        if args.command == 'analyze':
            return command_analyze(args, settings)
        elif args.command == 'config':
            return command_config(args, settings)
        else:
            print(f"Unknown command: {args.command}")
            return 1

    except Exception as e:
        print(f"❌ Error: {str(e)}")
        logging.error(f"Main error: {str(e)}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
