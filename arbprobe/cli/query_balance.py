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
from arbprobe.errors import ProbeError
from arbprobe.logging_utils import logging_basic_config
from arbprobe.service.network_identifier import identify
from arbprobe.service.rpc_client import connect

logging_basic_config()


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option(
    '-p',
    '--provider-uri',
    default=envs.PROVIDER_URL,
    show_default=True,
    type=str,
    help='The URI of the JSON-RPC endpoint.',
)
@click.option(
    '-a',
    '--address',
    default=envs.BALANCE_ADDRESS,
    show_default=True,
    type=ADDRESS,
    help='The account to query.',
)
@click.option(
    '-t',
    '--timeout',
    default=envs.REQUEST_TIMEOUT,
    show_default=True,
    type=int,
    help='Request timeout in seconds.',
)
def query_balance(provider_uri, address, timeout):
    """Prints the native balance of an account at the latest block."""
    click.echo(f'Address: {address}')
    click.echo(f'RPC: {provider_uri}')

    try:
        client = connect(provider_uri, timeout=timeout)
        network = identify(client.get_chain_id())
        balance = client.get_balance(address)
    except ProbeError as e:
        raise click.ClickException(f'Balance query failed: {e}') from e

    click.echo(f'Network: {network.label} (chain id {network.chain_id})')
    if network.is_production:
        click.echo('WARNING: production network, real assets at stake')
    click.echo(f'Balance (wei): {balance}')
    click.echo(f'Balance (ETH): {balance.to_ether()} ETH')
