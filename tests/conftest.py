"""Shared test fixtures."""

from __future__ import annotations

import pytest

from fbxmon.config.settings import FreeboxConfig, Settings
from fbxmon.device.models import RawPage

FBX_INFO = """\
______________________________________________________________________

                Etat de la Freebox
______________________________________________________________________


Informations générales :
========================

  Modèle                         Freebox ADSL
  Version du firmware            1.5.28
  Mode de connection             Dégroupé
  Temps depuis la mise en route  6 jours, 0 heure, 11 minutes


Téléphone :
===========

  Etat                           Ok
  Etat du combiné                Raccroché
  Sonnerie                       Inactive


Adsl :
======

  Etat                           Showtime
  Protocole                      ADSL2+
  Mode                           Interleaved

                        Descendant         Montant
                        --                 --
  Débit ATM             16353 kb/s         1136 kb/s
  Marge de bruit        6.30 dB            6.80 dB
  Atténuation           31.50 dB           19.20 dB
  FEC                   1006               0
  CRC                   208                0
  HEC                   6                  0


Réseau :
========

  Adresse MAC Freebox            00:07:cb:00:00:00
  Adresse IP                     82.0.0.1


Interfaces réseau :
===================

                        Lien            Débit entrant   Débit sortant
                        --              --              --
  WAN                   Ok              12 ko/s         3 ko/s
  Ethernet              100baseTX-FD    2 ko/s          11 ko/s
  USB                   Non connecté
  Switch                100baseTX-FD    1 ko/s          0 ko/s
"""


@pytest.fixture
def fbx_info_text() -> str:
    return FBX_INFO


@pytest.fixture
def sample_page() -> RawPage:
    return RawPage.from_text(FBX_INFO, url="http://mafreebox.freebox.fr/pub/fbx_info.txt")


@pytest.fixture
def empty_page() -> RawPage:
    return RawPage.from_text("")


@pytest.fixture
def sample_settings() -> Settings:
    return Settings(freebox=FreeboxConfig(host="192.168.0.254"))
