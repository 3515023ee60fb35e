"""Static graph metadata per metric family."""

from __future__ import annotations

from dataclasses import dataclass

from fbxmon.metrics import MetricFamily

GRAPH_CATEGORY = "freebox"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    info: str = ""
    draw: str = ""
    min: str = ""


@dataclass(frozen=True)
class GraphSpec:
    title: str
    vlabel: str
    info: str
    fields: tuple[FieldSpec, ...]
    args: str = "--base 1000"


def _down_up(prefix: str, what: str, min: str = "") -> tuple[FieldSpec, ...]:
    return (
        FieldSpec(f"{prefix}_down", "Descendant", info=f"{what} descendant",
                  min=min),
        FieldSpec(f"{prefix}_up", "Montant", info=f"{what} montant", min=min),
    )


def _counter_graph(name: str, meaning: str) -> GraphSpec:
    return GraphSpec(
        title=f"Erreurs {name}",
        vlabel="erreurs",
        info=f"Compteur d'erreurs {name} ({meaning}) de la ligne ADSL",
        fields=_down_up(name.lower(), f"Erreurs {name}", min="0"),
        args="--base 1000 -l 0",
    )


GRAPHS: dict[MetricFamily, GraphSpec] = {
    MetricFamily.STATUS: GraphSpec(
        title="Etat de la Freebox",
        vlabel="actif",
        info="Etat de la connexion et du combiné téléphonique (1 = actif)",
        args="--base 1000 -l 0 -u 1",
        fields=(
            FieldSpec("status", "Connexion", info="Connexion ADSL établie",
                      draw="AREA"),
            FieldSpec("phone", "Téléphone", info="Combiné décroché",
                      draw="LINE2"),
        ),
    ),
    MetricFamily.UPTIME: GraphSpec(
        title="Durée de fonctionnement",
        vlabel="jours",
        info="Temps depuis la mise en route de la Freebox",
        args="--base 1000 -l 0",
        fields=(
            FieldSpec("uptime", "Uptime", info="Durée en jours", draw="AREA"),
        ),
    ),
    MetricFamily.ATM: GraphSpec(
        title="Débit ATM",
        vlabel="bits/s",
        info="Débit ATM synchronisé de la ligne ADSL",
        args="--base 1024 -l 0",
        fields=_down_up("atm", "Débit ATM"),
    ),
    MetricFamily.ATTENUATION: GraphSpec(
        title="Atténuation",
        vlabel="dB",
        info="Atténuation de la ligne ADSL",
        fields=_down_up("attenuation", "Atténuation"),
    ),
    MetricFamily.SNR: GraphSpec(
        title="Marge de bruit",
        vlabel="dB",
        info="Marge de bruit (rapport signal/bruit) de la ligne ADSL",
        fields=_down_up("snr", "Marge de bruit"),
    ),
    MetricFamily.FEC: _counter_graph("FEC", "forward error correction"),
    MetricFamily.HEC: _counter_graph("HEC", "header error control"),
    MetricFamily.CRC: _counter_graph("CRC", "cyclic redundancy check"),
    MetricFamily.RATES: GraphSpec(
        title="Débit des interfaces",
        vlabel="ko/s entrant (+) / sortant (-)",
        info="Débit entrant et sortant des interfaces réseau",
        args="--base 1024",
        fields=tuple(
            FieldSpec(f"{iface}_{direction}",
                      f"{label} {'entrant' if direction == 'in' else 'sortant'}")
            for iface, label in (
                ("wan", "WAN"), ("ethernet", "Ethernet"),
                ("usb", "USB"), ("switch", "Switch"),
            )
            for direction in ("in", "out")
        ),
    ),
}


def graph_for(family: MetricFamily) -> GraphSpec:
    return GRAPHS[family]
