# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.



import click

from arbprobe.cli.params import ADDRESS
from arbprobe.config.envs import envs
from arbprobe.domain.amount import Amount
from arbprobe.domain.scan import DetailedReport, ScanAttempt, ScanReport
from arbprobe.errors import ProbeError
from arbprobe.logging_utils import logging_basic_config
from arbprobe.misc.info import KNOWN_ENDPOINTS, ZERO_ADDRESS
from arbprobe.service.network_scanner import build_detailed_report, scan_endpoints
from arbprobe.service.rpc_client import connect

logging_basic_config()


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option(
    '-p',
    '--provider-uri',
    default=envs.PROVIDER_URL,
    show_default=True,
    type=str,
    help='The URI of the JSON-RPC endpoint used for the detailed report.',
)
@click.option(
    '-c',
    '--target-chain-id',
    default=envs.TARGET_CHAIN_ID,
    show_default=True,
    type=int,
    help='The scan stops at the first endpoint reporting this chain id.',
)
@click.option(
    '-b',
    '--balance-address',
    default=ZERO_ADDRESS,
    show_default=True,
    type=ADDRESS,
    help='The account whose balance is included in the detailed report.',
)
@click.option(
    '--contract-address',
    default=envs.CONTRACT_ADDRESS,
    show_default=True,
    type=ADDRESS,
    help='The address checked for deployed bytecode.',
)
@click.option(
    '-t',
    '--timeout',
    default=envs.REQUEST_TIMEOUT,
    show_default=True,
    type=int,
    help='Request timeout in seconds.',
)
def scan_networks(provider_uri, target_chain_id, balance_address, contract_address, timeout):
    """Probes the public Arbitrum endpoints, then reports on one endpoint in detail."""
    click.echo('Scanning Arbitrum endpoints')
    click.echo('=' * 42)

    report = scan_endpoints(KNOWN_ENDPOINTS, target_chain_id, timeout=timeout)
    for attempt in report.attempts:
        echo_attempt(attempt)

    echo_scan_summary(report)

    click.echo()
    click.echo('Detailed report')
    click.echo('=' * 42)
    try:
        client = connect(provider_uri, timeout=timeout)
        details = build_detailed_report(
            client, balance_address, contract_address, target_chain_id
        )
    except ProbeError as e:
        raise click.ClickException(f'Detailed report failed for {provider_uri}: {e}') from e

    echo_detailed_report(details)


def echo_attempt(attempt: ScanAttempt):
    click.echo()
    click.echo(f'Trying {attempt.endpoint}')
    if attempt.failed:
        click.echo(f'  FAILED: {attempt.error}')
        return

    network = attempt.network
    click.echo(f'  Chain id: {attempt.chain_id}')
    click.echo(f'  Network: {network.label} ({network.notes})')
    if network.is_production:
        click.echo('  WARNING: production network, real assets at stake')

    for result in attempt.details:
        if not result.ok:
            click.echo(f'  {result.kind} query failed: {result.error}')
        elif isinstance(result.value, Amount):
            click.echo(f'  {result.kind}: {result.value.to_gwei()} Gwei')
        else:
            click.echo(f'  {result.kind}: {result.value}')


def echo_scan_summary(report: ScanReport):
    click.echo()
    if report.matched is None:
        click.echo(f'No endpoint reported chain id {report.target_chain_id}')
    else:
        click.echo(
            f'Chain id {report.target_chain_id} found at {report.matched.endpoint.url}'
        )
    if report.failures:
        click.echo(f'{len(report.failures)} endpoint(s) failed:')
        for attempt in report.failures:
            click.echo(f'  {attempt.endpoint}: {attempt.error}')


def echo_detailed_report(details: DetailedReport):
    click.echo(f'Endpoint: {details.endpoint}')
    marker = 'OK' if details.on_expected_chain else f'expected {details.expected_chain_id}'
    click.echo(f'1. Chain id: {details.chain_id} - {details.network.label} [{marker}]')
    click.echo(f'2. Latest block: {details.block_number}')
    click.echo(f'3. Gas price: {details.gas_price.to_gwei()} Gwei')
    click.echo(f'4. Balance of {details.balance_address}: {details.balance.to_ether()} ETH')

    code = details.code
    if not code.ok:
        click.echo(f'5. Code lookup for {details.contract_address} failed: {code.error}')
    elif code.value:
        click.echo(f'5. Contract {details.contract_address}: {len(code.value)} bytes of code')
    else:
        click.echo(f'5. No contract code at {details.contract_address}')
