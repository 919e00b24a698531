from setuptools import setup
import os

# see renlabs/runtime/aws/proxy/__init__.py for note about LEVEL
import logging
logging.basicConfig(datefmt='')
logger = logging.getLogger(__name__)
# LEVEL may be a name ('INFO') or a number ('20'), as in config.coerce_level
level = os.environ.get('LEVEL', 'DEBUG').strip()
try:
    logger.setLevel(int(level) if level.isdigit() else level.upper())
except ValueError:
    logger.setLevel(logging.DEBUG)

packages = ['renlabs.runtime.aws.proxy']
install_requires = ['Werkzeug>=2.2', 'pydantic>=2']
logger.info('Installing the AWS Lambda HTTP proxy runtime')

setup(
    name='lambda-proxy-runtime',
    version='1.0.0rc1',
    description='Run a plain HTTP request handler behind any AWS Lambda HTTP trigger',
    author='Steve Work',
    author_email='steve@work.renlabs.com',
    packages=packages,
    install_requires=install_requires,
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
)
