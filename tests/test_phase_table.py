import unittest
from signal_controller.domain.models import ControllerConfig, Light, Phase
from signal_controller.domain import phases

class TestPhaseTable(unittest.TestCase):
    def test_light_mapping(self):
        expected = {
            Phase.NS_GREEN: (Light.GREEN, Light.RED, False),
            Phase.NS_YELLOW: (Light.YELLOW, Light.RED, False),
            Phase.ALL_RED_1: (Light.RED, Light.RED, False),
            Phase.EW_GREEN: (Light.RED, Light.GREEN, False),
            Phase.EW_YELLOW: (Light.RED, Light.YELLOW, False),
            Phase.ALL_RED_2: (Light.RED, Light.RED, False),
            Phase.PED_WALK: (Light.RED, Light.RED, True),
        }
        for phase, (ns, ew, walk) in expected.items():
            lights = phases.lights_for(phase)
            self.assertEqual((lights.nsSignal, lights.ewSignal, lights.walk), (ns, ew, walk), phase)

    def test_walk_only_with_both_red(self):
        for phase in Phase:
            lights = phases.lights_for(phase)
            if lights.walk:
                self.assertEqual(lights.nsSignal, Light.RED)
                self.assertEqual(lights.ewSignal, Light.RED)

    def test_default_durations(self):
        cfg = ControllerConfig()
        durations = {p: phases.duration_for(p, cfg) for p in Phase}
        self.assertEqual(durations, {
            Phase.NS_GREEN: 10,
            Phase.NS_YELLOW: 3,
            Phase.ALL_RED_1: 1,
            Phase.EW_GREEN: 10,
            Phase.EW_YELLOW: 3,
            Phase.ALL_RED_2: 1,
            Phase.PED_WALK: 6,
        })

    def test_all_red_slots_share_duration(self):
        cfg = ControllerConfig(allRedTime=4, pedWalkTime=9)
        self.assertEqual(phases.duration_for(Phase.ALL_RED_1, cfg), 4)
        self.assertEqual(phases.duration_for(Phase.ALL_RED_2, cfg), 4)
        self.assertEqual(phases.duration_for(Phase.PED_WALK, cfg), 9)

    def test_normal_successor_is_six_cycle(self):
        phase = Phase.NS_GREEN
        seen = []
        for _ in range(6):
            seen.append(phase)
            phase = phases.next_normal_phase(phase)
        self.assertEqual(phase, Phase.NS_GREEN)
        self.assertEqual(tuple(seen), phases.NORMAL_CYCLE)
        self.assertEqual(len(set(seen)), 6)

    def test_walk_returns_to_ns_green(self):
        self.assertEqual(phases.next_normal_phase(Phase.PED_WALK), Phase.NS_GREEN)
        for all_red in phases.ALL_RED_PHASES:
            walk, consumed = phases.next_phase(all_red, True)
            self.assertTrue(consumed)
            self.assertEqual(phases.next_phase(walk, False), (Phase.NS_GREEN, False))
            self.assertEqual(phases.next_phase(walk, True), (Phase.NS_GREEN, False))

    def test_normal_successor_never_walk(self):
        for phase in Phase:
            self.assertNotEqual(phases.next_normal_phase(phase), Phase.PED_WALK)

    def test_safety_gate(self):
        for phase in Phase:
            nxt, consumed = phases.next_phase(phase, True)
            if phase in (Phase.ALL_RED_1, Phase.ALL_RED_2):
                self.assertEqual(nxt, Phase.PED_WALK)
                self.assertTrue(consumed)
            else:
                self.assertNotEqual(nxt, Phase.PED_WALK)
                self.assertFalse(consumed)
            # Without a request the gate never opens
            self.assertEqual(phases.next_phase(phase, False), (phases.next_normal_phase(phase), False))

    def test_display_names(self):
        self.assertEqual(phases.display_name(Phase.ALL_RED_1), "ALL_RED")
        self.assertEqual(phases.display_name(Phase.ALL_RED_2), "ALL_RED")
        self.assertEqual(phases.display_name(Phase.PED_WALK), "PED_WALK")

if __name__ == '__main__':
    unittest.main()
