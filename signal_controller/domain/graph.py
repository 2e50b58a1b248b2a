import networkx as nx
from typing import Any, Dict, List, Set

from signal_controller.domain.models import ControllerConfig, Phase
from signal_controller.domain import phases

class PhaseGraph:
    """Directed graph of every transition the controller can make."""

    def __init__(self):
        self.graph = nx.DiGraph()

    def add_phase(self, phase: Phase, duration: int):
        lights = phases.lights_for(phase)
        self.graph.add_node(phase, duration=duration, lights=lights, label=phases.display_name(phase))

    def add_transition(self, u: Phase, v: Phase, gated: bool = False):
        self.graph.add_edge(u, v, gated=gated)

    def get_edge_data(self, u: Phase, v: Phase) -> Dict[str, Any]:
        return self.graph.get_edge_data(u, v)

    def successors(self, phase: Phase) -> Set[Phase]:
        return set(self.graph.successors(phase))

    def predecessors(self, phase: Phase) -> Set[Phase]:
        return set(self.graph.predecessors(phase))

    def normal_cycle(self) -> List[Phase]:
        # Only ungated edges; the walk phase is not part of the closed loop
        ungated = nx.subgraph_view(
            self.graph, filter_edge=lambda u, v: not self.graph.edges[u, v]["gated"]
        )
        edges = nx.find_cycle(ungated, source=Phase.NS_GREEN)
        return [u for u, _ in edges]

    def cycle_length(self) -> int:
        return sum(self.graph.nodes[p]["duration"] for p in self.normal_cycle())

def build_phase_graph(cfg: ControllerConfig) -> PhaseGraph:
    pg = PhaseGraph()
    for phase in Phase:
        pg.add_phase(phase, phases.duration_for(phase, cfg))
    for phase in Phase:
        for pending in (False, True):
            nxt, consumed = phases.next_phase(phase, pending)
            pg.add_transition(phase, nxt, gated=consumed)
    return pg
