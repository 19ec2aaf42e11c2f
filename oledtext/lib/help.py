import logging
import sys

logger = logging.getLogger('OLEDTEXT').getChild(__name__)

MODULES = {
    'construct': dict(mandatory=True, desc='basic operation', install_name='construct>=2.10'),
    'yaml': dict(mandatory=False, desc='YAML configuration files', install_name='pyyaml>=5.2.0'),
}


def import_error_help(error):
    logger.error("Could not import Python3 module '{}': {}\n".format(error.name, error))

    if error.name in MODULES:
        m = MODULES[error.name]
        logger.error("The module is required for {} and IS{} mandatory.".format(m['desc'], ' NOT' if not m['mandatory'] else ''))
        if not m['mandatory']:
            logger.error('If you do not require such functionality, you can disable it in the config file,')
            logger.error('and skip installing the module.\n')
        logger.error("To install ONLY this module, execute: \n")
        logger.error(" pip3 install '{}'\n".format(m['install_name']))

    logger.error("To install ALL modules required, go to the main project folder and execute:\n")
    logger.error(" pip3 install -e '.[YAML]'\n")
    logger.error("ATTENTION: If this module is not listed there, please report the bug.")

    sys.exit(-1)
