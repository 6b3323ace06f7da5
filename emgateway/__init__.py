# emGateway Module
# -*- coding: utf-8 -*-
"""
 Python module that runs an energy management gateway for controllable appliances

 For more information see README.md

 Features
    * In-memory registry of devices keyed by device id
    * Per-device planning requests (time windows with duration bounds)
    * REST API with a uniform {status, data} envelope
    * Environment based configuration (EMG_* variables or .env file)

 Classes
    Gateway(name, uid, ip_address, port, max_age)
    Device(device_id, name, type, measurement_method, interruptions_allowed, max_power,
        em_signals_accepted, status, vendor, serial_nr, absolute_timestamps,
        optional_energy, min_on_time, min_off_time)
    ApiServer(port, gateway, host)

 Functions
    set_debug(toggle, color)  # Enable verbose logging

 Usage
    python -m emgateway run -port 8082
"""
import logging
import sys

version_tuple = (0, 3, 0)
version = __version__ = '%d.%d.%d' % version_tuple
__author__ = 'emgateway'

log = logging.getLogger(__name__)
log.debug('%s version %s', __name__, __version__)
log.debug('Python %s on %s', sys.version, sys.platform)


def set_debug(toggle=True, color=True):
    """Enable verbose logging"""
    if toggle:
        if color:
            logging.basicConfig(format='\x1b[31;1m%(levelname)s:%(message)s\x1b[0m', level=logging.DEBUG)
        else:
            logging.basicConfig(format='%(levelname)s:%(message)s', level=logging.DEBUG)
        log.setLevel(logging.DEBUG)
        log.debug("%s [%s]\n" % (__name__, __version__))
    else:
        log.setLevel(logging.NOTSET)
