'''
To Run:
python -m telephone_bill.cli calls.csv
'''
import click
import logging
from pathlib import Path
from telephone_bill import calculator, config, log_parser, report

logger = logging.getLogger(__name__)

@click.command()
@click.option('--tariff', 'tariff_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help='YAML tariff file (defaults to the packaged tariff)')
@click.option('--breakdown-csv', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='Also write the per-number breakdown to this CSV file')
@click.option('-v', '--verbose', is_flag=True, help='Log per-number details')
@click.argument('log_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def main(tariff_path, breakdown_csv, verbose, log_file):
    """
    Calculate the telephone bill for a call log.

    LOG_FILE is CSV text with one call per line:
    phone number, start and end of the call as dd-MM-yyyy HH:mm:ss.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format='%(levelname)s: %(message)s')

    try:
        tariff = config.load_tariff(tariff_path)
        records = log_parser.read_log(log_file, tariff)
    except (config.TariffConfigError, log_parser.LogParseError) as e:
        raise click.ClickException(str(e)) from e

    charges = calculator.bill_breakdown(records, tariff)
    total = calculator.total_of(charges)

    if breakdown_csv is not None:
        report.write_breakdown(breakdown_csv, charges)
        click.echo(f'✔ Breakdown for {len(charges)} number(s) written to {breakdown_csv}')

    click.echo(report.format_bill_report(charges, total))

if __name__ == '__main__':
    main()
