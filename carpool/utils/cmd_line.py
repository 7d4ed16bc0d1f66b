import click
from pydantic import ValidationError
import uvicorn

from carpool.api.api import build_app
from carpool.config.config import ServiceConfig, SimulatorConfig
from carpool.demand_simulator.demand_simulator import DemandSimulator
from carpool.pool.pool import Pool
from carpool.utils.log import configure_logging


def load_config(config_class, config_path):
    if not config_path:
        return config_class()
    try:
        return config_class.from_file(config_path)
    except (ValueError, ValidationError) as e:
        raise click.BadParameter(str(e), param_hint='--config')


@click.group()
def cli():
    """Car pooling service."""


@cli.command()
@click.option('--config', 'config_path', default=None, type=click.Path(exists=True, dir_okay=False), help='JSON file with host, port and log_level')
@click.option('--host', default=None, help='interface to bind, overrides the config file')
@click.option('--port', default=None, type=int, help='port to listen on, overrides the config file')
@click.option('--log-level', default=None, help='DEBUG, INFO, WARNING or ERROR')
def serve(config_path, host, port, log_level):
    config = load_config(ServiceConfig, config_path)
    overrides = {'host': host, 'port': port, 'log_level': log_level}
    config = config.model_copy(update={key: value for key, value in overrides.items() if value is not None})

    configure_logging(config.log_level)
    app = build_app(pool=Pool(), config=config)
    click.echo('Serving on ' + config.host + ':' + str(config.port))
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


@cli.command()
@click.option('--config', 'config_path', default=None, type=click.Path(exists=True, dir_okay=False), help='JSON file with the simulator settings')
@click.option('--n-intervals', default=None, type=int, help='number of intervals to simulate')
@click.option('--seed', default=None, type=int, help='random seed')
@click.option('--output', default=None, type=click.Path(dir_okay=False), help='write the per interval results to this CSV file')
@click.option('--log-level', default='WARNING', help='DEBUG, INFO, WARNING or ERROR')
def simulate(config_path, n_intervals, seed, output, log_level):
    configure_logging(log_level)

    config = load_config(SimulatorConfig, config_path)
    overrides = {'n_intervals': n_intervals, 'seed': seed}
    config = config.model_copy(update={key: value for key, value in overrides.items() if value is not None})

    simulator = DemandSimulator(config=config, pool=Pool())
    df = simulator.run()

    click.echo('intervals: ' + str(len(df)))
    if len(df) > 0:
        click.echo('journeys requested: ' + str(int(df['journeys'].sum())))
        click.echo('drop-offs: ' + str(int(df['dropoffs'].sum())))
        click.echo('max pending: ' + str(int(df['pending'].max())))
        click.echo('mean utilisation: ' + str(round(float(df['utilisation'].mean()), 3)))

    if output:
        df.to_csv(output, index=False)
        click.echo('results written to ' + output)


if __name__ == '__main__':
    cli()
