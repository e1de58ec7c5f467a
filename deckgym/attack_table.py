"""Lookup of special attack effects by card id and attack index."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from deckgym.attack_ids import AttackId

_A = AttackId

_TABLE: Mapping[tuple[str, int], AttackId] = MappingProxyType(
    {
        ("A1 003", 0): _A.A1003VenusaurMegaDrain,
        ("A1 004", 1): _A.A1004VenusaurExGiantBloom,
        ("A1 005", 0): _A.A1005CaterpieFindAFriend,
        ("A1 013", 0): _A.A1013VileplumeSoothingScent,
        ("A1 017", 0): _A.A1017VenomothPoisonPowder,
        ("A1 022", 0): _A.A1022ExeggutorStomp,
        ("A1 023", 0): _A.A1023ExeggutorExTropicalSwing,
        ("A1 024", 0): _A.A1024TangelaAbsorb,
        ("A1 026", 0): _A.A1026PinsirDoubleHorn,
        ("A1 029", 0): _A.A1029PetililBlot,
        ("A1 030", 0): _A.A1030LilligantLeafSupply,
        ("A1 031", 0): _A.A1031Skiddo,
        ("A1 033", 0): _A.A1033CharmanderEmber,
        ("A1 035", 0): _A.A1035CharizardFireSpin,
        ("A1 036", 1): _A.A1036CharizardExCrimsonStorm,
        ("A1 038", 0): _A.A1038NinetalesFlamethrower,
        ("A1 040", 0): _A.A1040ArcanineHeatTackle,
        ("A1 041", 0): _A.A1041ArcanineExInfernoOnrush,
        ("A1 045", 0): _A.A1045FlareonFlamethrower,
        ("A1 046", 0): _A.A1046MoltresSkyAttack,
        ("A1 047", 0): _A.A1047MoltresExInfernoDance,
        ("A1 052", 0): _A.A1052CentiskorchFireBlast,
        ("A1 055", 0): _A.A1055BlastoiseHydroPump,
        ("A1 056", 1): _A.A1056BlastoiseExHydroBazooka,
        ("A1 057", 0): _A.A1057PsyduckHeadache,
        ("A1 063", 0): _A.A1063TentacruelPoisonTentacles,
        ("A1 069", 0): _A.A1069KinglerKOCrab,
        ("A1 071", 0): _A.A1071SeadraWaterArrow,
        ("A1 073", 0): _A.A1073SeakingHornHazard,
        ("A1 078", 0): _A.A1078GyaradosHyperBeam,
        ("A1 233", 0): _A.A1078GyaradosHyperBeam,
        ("A1 079", 0): _A.A1079LaprasHydroPump,
        ("A1 234", 0): _A.A1079LaprasHydroPump,
        ("A1 080", 0): _A.A1080VaporeonBubbleDrain,
        ("A1 083", 0): _A.A1083ArticunoIceBeam,
        ("A1 084", 1): _A.A1084ArticunoExBlizzard,
        ("A1 091", 0): _A.A1091BruxishSecondStrike,
        ("A1 093", 0): _A.A1093FrosmothPowderSnow,
        ("A1 095", 0): _A.A1095RaichuThunderbolt,
        ("A1 096", 0): _A.A1096PikachuExCircleCircuit,
        ("A1 101", 0): _A.A1101ElectabuzzThunderPunch,
        ("A1 102", 0): _A.A1102JolteonPinMissile,
        ("A1 103", 0): _A.A1103ZapdosRagingThunder,
        ("A1 104", 1): _A.A1104ZapdosExThunderingHurricane,
        ("A1 106", 0): _A.A1106ZebstrikaThunderSpear,
        ("A1 109", 0): _A.A1109EelektrossThunderFang,
        ("A1 111", 0): _A.A1111HelioliskQuickAttack,
        ("A1 112", 0): _A.A1112PincurchinThunderShock,
        ("A1 115", 0): _A.A1115AbraTeleport,
        ("A1 117", 0): _A.A1117AlakazamPsychic,
        ("A1 126", 0): _A.A1126MrMimeBarrierAttack,
        ("A1 127", 0): _A.A1127JynxPsychic,
        ("A1 128", 0): _A.A1128MewtwoPowerBlast,
        ("A1 129", 1): _A.A1129MewtwoExPsydrive,
        ("A1 136", 0): _A.A1136GolurkDoubleLariat,
        ("A1 142", 0): _A.A1142PrimeapeFightBack,
        ("A1 149", 0): _A.A1149GolemDoubleEdge,
        ("A1 153", 0): _A.A1153MarowakExBonemerang,
        ("A1 154", 0): _A.A1154HitmonleeStretchKick,
        ("A1 163", 0): _A.A1163GrapploctKnockBack,
        ("A1 165", 0): _A.A1165ArbokCorner,
        ("A1 171", 0): _A.A1171NidokingPoisonHorn,
        ("A1 174", 0): _A.A1174GrimerPoisonGas,
        ("A1 178", 0): _A.A1178MawileCrunch,
        ("A1 181", 0): _A.A1181MeltanAmass,
        ("A1 195", 0): _A.A1195WigglytuffSleepySong,
        ("A1 196", 0): _A.A1196MeowthPayDay,
        ("A1 201", 0): _A.A1201LickitungContinuousLick,
        ("A1 203", 0): _A.A1203KangaskhanDizzyPunch,
        ("A1 213", 0): _A.A1213CinccinoDoTheWave,
        # A1 full arts
        ("A1 229", 0): _A.A1026PinsirDoubleHorn,
        ("A1 230", 0): _A.A1033CharmanderEmber,
        ("A1 241", 0): _A.A1171NidokingPoisonHorn,
        ("A1 246", 0): _A.A1196MeowthPayDay,
        ("A1 251", 1): _A.A1004VenusaurExGiantBloom,
        ("A1 252", 0): _A.A1023ExeggutorExTropicalSwing,
        ("A1 253", 1): _A.A1036CharizardExCrimsonStorm,
        ("A1 254", 0): _A.A1041ArcanineExInfernoOnrush,
        ("A1 255", 0): _A.A1047MoltresExInfernoDance,
        ("A1 256", 1): _A.A1056BlastoiseExHydroBazooka,
        ("A1 259", 0): _A.A1096PikachuExCircleCircuit,
        ("A1 260", 1): _A.A1104ZapdosExThunderingHurricane,
        ("A1 262", 1): _A.A1129MewtwoExPsydrive,
        ("A1 264", 0): _A.A1153MarowakExBonemerang,
        ("A1 265", 0): _A.A1195WigglytuffSleepySong,
        ("A1 274", 0): _A.A1047MoltresExInfernoDance,
        ("A1 276", 1): _A.A1104ZapdosExThunderingHurricane,
        ("A1 279", 0): _A.A1195WigglytuffSleepySong,
        ("A1 280", 1): _A.A1036CharizardExCrimsonStorm,
        ("A1 281", 0): _A.A1096PikachuExCircleCircuit,
        ("A1 282", 1): _A.A1129MewtwoExPsydrive,
        ("A1 284", 1): _A.A1036CharizardExCrimsonStorm,
        ("A1 285", 0): _A.A1096PikachuExCircleCircuit,
        ("A1 286", 1): _A.A1129MewtwoExPsydrive,
        # A1a
        ("A1a 001", 0): _A.A1a001ExeggcuteGrowth,
        ("A1a 003", 0): _A.A1a003CelebiExPowerfulBloom,
        ("A1a 010", 0): _A.A1a010PonytaStomp,
        ("A1a 011", 0): _A.A1a011RapidashRisingLunge,
        ("A1a 021", 0): _A.A1a021LumineonAqua,
        ("A1a 026", 0): _A.A1a026RaichuGigashock,
        ("A1a 030", 0): _A.A1a030DedenneThunderShock,
        ("A1a 041", 0): _A.A1a041MankeyFocusFist,
        ("A1a 045", 0): _A.A1a045GolemGuardPress,
        ("A1a 061", 0): _A.A1a061EeveeContinuousSteps,
        ("A1a 073", 0): _A.A1a030DedenneThunderShock,
        ("A1a 075", 0): _A.A1a003CelebiExPowerfulBloom,
        ("A1a 085", 0): _A.A1a003CelebiExPowerfulBloom,
        # A2
        ("A2 023", 0): _A.A2023MagmarStoke,
        ("A2 035", 0): _A.A2035PiplupHeal,
        ("A2 049", 1): _A.A2049PalkiaDimensionalStorm,
        ("A2 053", 0): _A.A2053MagnezoneThunderBlast,
        ("A2 056", 0): _A.A2056ElectabuzzCharge,
        ("A2 073", 0): _A.A2073DrifloonExpand,
        ("A2 084", 0): _A.A2084GliscorAcrobatics,
        ("A2 098", 0): _A.A2098SneaselDoubleScratch,
        ("A2 117", 0): _A.A2117BronzongGuardPress,
        ("A2 118", 0): _A.A2118ProbopassTripleNose,
        ("A2 131", 0): _A.A2131AmbipomDoubleHit,
        ("A2 141", 0): _A.A2141ChatotFuryAttack,
        ("A2 182", 1): _A.A2049PalkiaDimensionalStorm,
        ("A2 204", 1): _A.A2049PalkiaDimensionalStorm,
        ("A2 206", 1): _A.A2049PalkiaDimensionalStorm,
        ("A2 050", 0): _A.A2050ManaphyOceanic,
        ("A2 162", 0): _A.A2050ManaphyOceanic,
        ("A2 165", 0): _A.A2073DrifloonExpand,
        ("A2 119", 0): _A.A2119DialgaExMetallicTurbo,
        ("A2 188", 0): _A.A2119DialgaExMetallicTurbo,
        ("A2 205", 0): _A.A2119DialgaExMetallicTurbo,
        ("A2 207", 0): _A.A2119DialgaExMetallicTurbo,
        # A2a
        ("A2a 001", 0): _A.A2a001HeracrossSingleHornThrow,
        ("A2a 057", 0): _A.A2a057ProbopassExDefensiveUnit,
        ("A2a 071", 0): _A.A2a071ArceusExUltimateForce,
        ("A2a 085", 0): _A.A2a057ProbopassExDefensiveUnit,
        ("A2a 086", 0): _A.A2a071ArceusExUltimateForce,
        ("A2a 094", 0): _A.A2a057ProbopassExDefensiveUnit,
        ("A2a 095", 0): _A.A2a071ArceusExUltimateForce,
        ("A2a 096", 0): _A.A2a071ArceusExUltimateForce,
        # A2b
        ("A2b 001", 0): _A.A2b001WeedleMultiply,
        ("A2b 002", 0): _A.A2b002KakunaStringShot,
        ("A2b 003", 0): _A.A2b003BeedrillExCrushingSpear,
        ("A2b 005", 0): _A.A2b005SprigatitoCryForHelp,
        ("A2b 007", 0): _A.A2b007MeowscaradaFightingClaws,
        ("A2b 010", 0): _A.A2b010CharizardExStoke,
        ("A2b 022", 0): _A.A2b022PikachuExThunderbolt,
        ("A2b 032", 0): _A.A2b032MrMimeJuggling,
        ("A2b 035", 0): _A.A2b035GiratinaExChaoticImpact,
        ("A2b 044", 0): _A.A2b044FlamigoDoubleKick,
        ("A2b 073", 0): _A.A2b007MeowscaradaFightingClaws,
        ("A2b 079", 0): _A.A2b003BeedrillExCrushingSpear,
        ("A2b 080", 0): _A.A2b010CharizardExStoke,
        ("A2b 082", 0): _A.A2b022PikachuExThunderbolt,
        ("A2b 083", 0): _A.A2b035GiratinaExChaoticImpact,
        ("A2b 092", 0): _A.A2b022PikachuExThunderbolt,
        ("A2b 096", 0): _A.A2b035GiratinaExChaoticImpact,
        ("A2b 097", 0): _A.A2b001WeedleMultiply,
        ("A2b 098", 0): _A.A2b002KakunaStringShot,
        ("A2b 107", 0): _A.A2b003BeedrillExCrushingSpear,
        ("A2b 108", 0): _A.A2b010CharizardExStoke,
        # A3
        ("A3 019", 0): _A.A3019SteeneeDoubleSpin,
        ("A3 020", 0): _A.A3020TsareenaThreeKickCombo,
        ("A3 040", 0): _A.A3040AlolanVulpixCallForth,
        ("A3 041", 0): _A.A3041AlolanNinetalesBlizzard,
        ("A3 043", 0): _A.A3043CloysterGuardPress,
        ("A3 071", 0): _A.A3071SpoinkPsycharge,
        ("A3 085", 0): _A.A3085CosmogTeleport,
        ("A3 086", 0): _A.A3086CosmoemStiffen,
        ("A3 116", 0): _A.A3116ToxapexSpikeCannon,
        ("A3 122", 0): _A.A3122SolgaleoExSolBreaker,
        ("A3 158", 0): _A.A3020TsareenaThreeKickCombo,
        ("A3 171", 0): _A.A3085CosmogTeleport,
        ("A3 189", 0): _A.A3122SolgaleoExSolBreaker,
        ("A3 207", 0): _A.A3122SolgaleoExSolBreaker,
        ("A3 236", 0): _A.A1153MarowakExBonemerang,
        ("A3 239", 0): _A.A3122SolgaleoExSolBreaker,
        # A3a
        ("A3a 003", 0): _A.A3a003RowletFuryAttack,
        ("A3a 006", 1): _A.A3a006BuzzwoleExBigBeat,
        ("A3a 007", 0): _A.A3a007PheromosaJumpBlues,
        ("A3a 019", 0): _A.A3a019TapuKokoExPlasmaHurricane,
        ("A3a 043", 0): _A.A3a043GuzzlordExGrindcore,
        ("A3a 044", 0): _A.A3a044Poipole2Step,
        ("A3a 045", 0): _A.A3a045NagaedelElectroHouse,
        ("A3a 047", 0): _A.A3a047AlolanDugtrioExTripletHeadbutt,
        ("A3a 053", 0): _A.A3a053StakatakaBrassRock,
        ("A3a 060", 0): _A.A3a060TypeNullQuickBlow,
        ("A3a 061", 0): _A.A3a061SilvallyBraveBuddies,
        ("A3a 062", 0): _A.A3a062CelesteelaMoombahton,
        ("A3a 070", 0): _A.A3a003RowletFuryAttack,
        ("A3a 071", 0): _A.A3a007PheromosaJumpBlues,
        ("A3a 074", 0): _A.A3a061SilvallyBraveBuddies,
        ("A3a 075", 0): _A.A3a062CelesteelaMoombahton,
        ("A3a 076", 1): _A.A3a006BuzzwoleExBigBeat,
        ("A3a 077", 0): _A.A3a019TapuKokoExPlasmaHurricane,
        ("A3a 079", 0): _A.A3a043GuzzlordExGrindcore,
        ("A3a 080", 0): _A.A3a047AlolanDugtrioExTripletHeadbutt,
        ("A3a 084", 0): _A.A3a019TapuKokoExPlasmaHurricane,
        ("A3a 086", 0): _A.A3a043GuzzlordExGrindcore,
        ("A3a 087", 0): _A.A3a047AlolanDugtrioExTripletHeadbutt,
        ("A3a 088", 1): _A.A3a006BuzzwoleExBigBeat,
        ("A3a 094", 0): _A.A3a094JynxPsychic,
        # A3b
        ("A3b 009", 0): _A.A3b009FlareonExFireSpin,
        ("A3b 013", 0): _A.A3b013IncineroarDarkestLariat,
        ("A3b 020", 0): _A.A3b020VanilluxeDoubleSpin,
        ("A3b 053", 0): _A.A3b053DragoniteExGigaImpact,
        ("A3b 055", 0): _A.A3b055EeveeCollect,
        ("A3b 058", 0): _A.A3b058AipomDoubleHit,
        ("A3b 078", 0): _A.A3b055EeveeCollect,
        ("A3b 079", 0): _A.A3b009FlareonExFireSpin,
        ("A3b 082", 0): _A.A3b053DragoniteExGigaImpact,
        ("A3b 087", 0): _A.A3b009FlareonExFireSpin,
        ("A3b 090", 0): _A.A3b053DragoniteExGigaImpact,
        ("A3b 105", 1): _A.A1104ZapdosExThunderingHurricane,
        # A4
        ("A4 021", 0): _A.A4021ShuckleExTripleSlap,
        ("A4 026", 0): _A.A4026NinetalesScorchingBreath,
        ("A4 032", 0): _A.A4032MagbyToasty,
        ("A4 105", 0): _A.A4105BinacleDualChop,
        ("A4 146", 0): _A.A4146UrsaringSwingAround,
        ("A4 166", 0): _A.A4032MagbyToasty,
        ("A4 066", 0): _A.A4066PichuCrackly,
        ("A4 171", 0): _A.A4066PichuCrackly,
        ("A4 077", 0): _A.A4077CleffaTwinkly,
        ("A4 102", 0): _A.A4102HitmontopPiercingSpin,
        ("A4 104", 0): _A.A4104PupitarGuardPress,
        ("A4 124", 0): _A.A4124SkarmoryExSteelWing,
        ("A4 134", 0): _A.A4134EeveeFindAFriend,
        ("A4 149", 0): _A.A4149LugiaExElementalBlast,
        ("A4 186", 0): _A.A4021ShuckleExTripleSlap,
        ("A4 194", 0): _A.A4124SkarmoryExSteelWing,
        ("A4 195", 0): _A.A4149LugiaExElementalBlast,
        ("A4 202", 0): _A.A4021ShuckleExTripleSlap,
        ("A4 209", 0): _A.A4124SkarmoryExSteelWing,
        ("A4 211", 0): _A.A4149LugiaExElementalBlast,
        ("A4 231", 0): _A.A4134EeveeFindAFriend,
        ("A4 241", 0): _A.A4149LugiaExElementalBlast,
        # A4a
        ("A4a 020", 0): _A.A4a020SuicuneExCrystalWaltz,
        ("A4a 080", 0): _A.A4a020SuicuneExCrystalWaltz,
        ("A4a 090", 0): _A.A4a020SuicuneExCrystalWaltz,
        ("A4a 023", 0): _A.A4a023MantykeSplashy,
        ("A4a 025", 0): _A.A4a025RaikouExVoltaicBullet,
        ("A4a 081", 0): _A.A4a025RaikouExVoltaicBullet,
        ("A4a 088", 0): _A.A4a025RaikouExVoltaicBullet,
        ("A4a 096", 0): _A.A1069KinglerKOCrab,
        ("A4a 105", 0): _A.A4a023MantykeSplashy,
        # A4b
        ("A4b 023", 0): _A.A4134EeveeFindAFriend,
        ("A4b 044", 1): _A.A3a006BuzzwoleExBigBeat,
        ("A4b 045", 0): _A.A3a007PheromosaJumpBlues,
        ("A4b 046", 0): _A.A3a007PheromosaJumpBlues,
        ("A4b 148", 0): _A.A3a019TapuKokoExPlasmaHurricane,
        ("A4b 060", 0): _A.A2b010CharizardExStoke,
        ("A4b 066", 0): _A.A3b009FlareonExFireSpin,
        ("A4b 108", 0): _A.A2050ManaphyOceanic,
        ("A4b 109", 0): _A.A2050ManaphyOceanic,
        ("A4b 137", 0): _A.A2053MagnezoneThunderBlast,
        ("A4b 138", 0): _A.A2053MagnezoneThunderBlast,
        ("A4b 139", 1): _A.A1104ZapdosExThunderingHurricane,
        ("A4b 182", 0): _A.A3086CosmoemStiffen,
        ("A4b 183", 0): _A.A3086CosmoemStiffen,
        ("A4b 196", 0): _A.A1153MarowakExBonemerang,
        ("A4b 242", 0): _A.A2098SneaselDoubleScratch,
        ("A4b 243", 0): _A.A2098SneaselDoubleScratch,
        ("A4b 248", 0): _A.A3a043GuzzlordExGrindcore,
        ("A4b 251", 0): _A.A3a047AlolanDugtrioExTripletHeadbutt,
        ("A4b 252", 0): _A.A4124SkarmoryExSteelWing,
        ("A4b 253", 0): _A.A2a057ProbopassExDefensiveUnit,
        ("A4b 271", 0): _A.A3b053DragoniteExGigaImpact,
        ("A4b 289", 0): _A.A4149LugiaExElementalBlast,
        ("A4b 300", 0): _A.A3a060TypeNullQuickBlow,
        ("A4b 301", 0): _A.A3a060TypeNullQuickBlow,
        ("A4b 302", 0): _A.A3a061SilvallyBraveBuddies,
        ("A4b 303", 0): _A.A3a061SilvallyBraveBuddies,
        ("A4b 304", 0): _A.A3a062CelesteelaMoombahton,
        ("A4b 305", 0): _A.A3a062CelesteelaMoombahton,
        ("A4b 360", 1): _A.A3a006BuzzwoleExBigBeat,
        ("A4b 371", 0): _A.A4149LugiaExElementalBlast,
        # Promo
        ("P-A 012", 0): _A.A1196MeowthPayDay,
        ("P-A 031", 0): _A.PA031CinccinoDoTheWave,
        ("P-A 034", 0): _A.PA034PiplupHeal,
        ("P-A 048", 0): _A.A2050ManaphyOceanic,
        ("P-A 052", 0): _A.PA052SprigatitoCryForHelp,
        ("P-A 060", 0): _A.PA060ExeggcuteGrowth,
        ("P-A 067", 0): _A.A3085CosmogTeleport,
        ("P-A 070", 0): _A.A3041AlolanNinetalesBlizzard,
        ("P-A 072", 0): _A.PA072AlolanGrimerPoison,
    }
)


def attack_id_for(pokemon_id: str, index: int) -> Optional[AttackId]:
    """Return the special attack at ``index`` on card ``pokemon_id``.

    Returns None when the card's attack has no special effect registered.
    """
    return _TABLE.get((pokemon_id, index))