"""Identifiers for card attacks whose effects go beyond fixed damage."""

from enum import Enum


class AttackId(str, Enum):
    """An attack with a special effect, identified by card and attack name.

    Each member's value is its own name, so members serialise to and from
    the plain variant name.
    """

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name

    def __str__(self) -> str:
        return self.value

    A1003VenusaurMegaDrain = "A1003VenusaurMegaDrain"
    A1004VenusaurExGiantBloom = "A1004VenusaurExGiantBloom"
    A1005CaterpieFindAFriend = "A1005CaterpieFindAFriend"
    A1013VileplumeSoothingScent = "A1013VileplumeSoothingScent"
    A1017VenomothPoisonPowder = "A1017VenomothPoisonPowder"
    A1022ExeggutorStomp = "A1022ExeggutorStomp"
    A1023ExeggutorExTropicalSwing = "A1023ExeggutorExTropicalSwing"
    A1024TangelaAbsorb = "A1024TangelaAbsorb"
    A1026PinsirDoubleHorn = "A1026PinsirDoubleHorn"
    A1029PetililBlot = "A1029PetililBlot"
    A1030LilligantLeafSupply = "A1030LilligantLeafSupply"
    A1031Skiddo = "A1031Skiddo"
    A1033CharmanderEmber = "A1033CharmanderEmber"
    A1035CharizardFireSpin = "A1035CharizardFireSpin"
    A1036CharizardExCrimsonStorm = "A1036CharizardExCrimsonStorm"
    A1038NinetalesFlamethrower = "A1038NinetalesFlamethrower"
    A1040ArcanineHeatTackle = "A1040ArcanineHeatTackle"
    A1041ArcanineExInfernoOnrush = "A1041ArcanineExInfernoOnrush"
    A1045FlareonFlamethrower = "A1045FlareonFlamethrower"
    A1046MoltresSkyAttack = "A1046MoltresSkyAttack"
    A1047MoltresExInfernoDance = "A1047MoltresExInfernoDance"
    A1052CentiskorchFireBlast = "A1052CentiskorchFireBlast"
    A1055BlastoiseHydroPump = "A1055BlastoiseHydroPump"
    A1056BlastoiseExHydroBazooka = "A1056BlastoiseExHydroBazooka"
    A1057PsyduckHeadache = "A1057PsyduckHeadache"
    A1063TentacruelPoisonTentacles = "A1063TentacruelPoisonTentacles"
    A1069KinglerKOCrab = "A1069KinglerKOCrab"
    A1071SeadraWaterArrow = "A1071SeadraWaterArrow"
    A1073SeakingHornHazard = "A1073SeakingHornHazard"
    A1078GyaradosHyperBeam = "A1078GyaradosHyperBeam"
    A1079LaprasHydroPump = "A1079LaprasHydroPump"
    A1080VaporeonBubbleDrain = "A1080VaporeonBubbleDrain"
    A1083ArticunoIceBeam = "A1083ArticunoIceBeam"
    A1084ArticunoExBlizzard = "A1084ArticunoExBlizzard"
    A1091BruxishSecondStrike = "A1091BruxishSecondStrike"
    A1093FrosmothPowderSnow = "A1093FrosmothPowderSnow"
    A1095RaichuThunderbolt = "A1095RaichuThunderbolt"
    A1096PikachuExCircleCircuit = "A1096PikachuExCircleCircuit"
    A1101ElectabuzzThunderPunch = "A1101ElectabuzzThunderPunch"
    A1102JolteonPinMissile = "A1102JolteonPinMissile"
    A1103ZapdosRagingThunder = "A1103ZapdosRagingThunder"
    A1104ZapdosExThunderingHurricane = "A1104ZapdosExThunderingHurricane"
    A1106ZebstrikaThunderSpear = "A1106ZebstrikaThunderSpear"
    A1109EelektrossThunderFang = "A1109EelektrossThunderFang"
    A1111HelioliskQuickAttack = "A1111HelioliskQuickAttack"
    A1112PincurchinThunderShock = "A1112PincurchinThunderShock"
    A1115AbraTeleport = "A1115AbraTeleport"
    A1117AlakazamPsychic = "A1117AlakazamPsychic"
    A1126MrMimeBarrierAttack = "A1126MrMimeBarrierAttack"
    A1127JynxPsychic = "A1127JynxPsychic"
    A1128MewtwoPowerBlast = "A1128MewtwoPowerBlast"
    A1129MewtwoExPsydrive = "A1129MewtwoExPsydrive"
    A1136GolurkDoubleLariat = "A1136GolurkDoubleLariat"
    A1142PrimeapeFightBack = "A1142PrimeapeFightBack"
    A1149GolemDoubleEdge = "A1149GolemDoubleEdge"
    A1153MarowakExBonemerang = "A1153MarowakExBonemerang"
    A1154HitmonleeStretchKick = "A1154HitmonleeStretchKick"
    A1163GrapploctKnockBack = "A1163GrapploctKnockBack"
    A1165ArbokCorner = "A1165ArbokCorner"
    A1171NidokingPoisonHorn = "A1171NidokingPoisonHorn"
    A1174GrimerPoisonGas = "A1174GrimerPoisonGas"
    A1178MawileCrunch = "A1178MawileCrunch"
    A1181MeltanAmass = "A1181MeltanAmass"
    A1195WigglytuffSleepySong = "A1195WigglytuffSleepySong"
    A1196MeowthPayDay = "A1196MeowthPayDay"
    A1201LickitungContinuousLick = "A1201LickitungContinuousLick"
    A1203KangaskhanDizzyPunch = "A1203KangaskhanDizzyPunch"
    A1213CinccinoDoTheWave = "A1213CinccinoDoTheWave"
    A1a001ExeggcuteGrowth = "A1a001ExeggcuteGrowth"
    A1a003CelebiExPowerfulBloom = "A1a003CelebiExPowerfulBloom"
    A1a010PonytaStomp = "A1a010PonytaStomp"
    A1a011RapidashRisingLunge = "A1a011RapidashRisingLunge"
    A1a026RaichuGigashock = "A1a026RaichuGigashock"
    A1a021LumineonAqua = "A1a021LumineonAqua"
    A1a030DedenneThunderShock = "A1a030DedenneThunderShock"
    A1a041MankeyFocusFist = "A1a041MankeyFocusFist"
    A1a045GolemGuardPress = "A1a045GolemGuardPress"
    A1a061EeveeContinuousSteps = "A1a061EeveeContinuousSteps"
    A3b055EeveeCollect = "A3b055EeveeCollect"
    A2023MagmarStoke = "A2023MagmarStoke"
    A2035PiplupHeal = "A2035PiplupHeal"
    A2049PalkiaDimensionalStorm = "A2049PalkiaDimensionalStorm"
    A2050ManaphyOceanic = "A2050ManaphyOceanic"
    A2056ElectabuzzCharge = "A2056ElectabuzzCharge"
    A2073DrifloonExpand = "A2073DrifloonExpand"
    A2084GliscorAcrobatics = "A2084GliscorAcrobatics"
    A2098SneaselDoubleScratch = "A2098SneaselDoubleScratch"
    A2117BronzongGuardPress = "A2117BronzongGuardPress"
    A2118ProbopassTripleNose = "A2118ProbopassTripleNose"
    A2119DialgaExMetallicTurbo = "A2119DialgaExMetallicTurbo"
    A2131AmbipomDoubleHit = "A2131AmbipomDoubleHit"
    A2141ChatotFuryAttack = "A2141ChatotFuryAttack"
    A2a001HeracrossSingleHornThrow = "A2a001HeracrossSingleHornThrow"
    A2a057ProbopassExDefensiveUnit = "A2a057ProbopassExDefensiveUnit"
    A2a071ArceusExUltimateForce = "A2a071ArceusExUltimateForce"
    A2b001WeedleMultiply = "A2b001WeedleMultiply"
    A2b002KakunaStringShot = "A2b002KakunaStringShot"
    A2b003BeedrillExCrushingSpear = "A2b003BeedrillExCrushingSpear"
    A2b005SprigatitoCryForHelp = "A2b005SprigatitoCryForHelp"
    A2b007MeowscaradaFightingClaws = "A2b007MeowscaradaFightingClaws"
    A2b010CharizardExStoke = "A2b010CharizardExStoke"
    A2b022PikachuExThunderbolt = "A2b022PikachuExThunderbolt"
    A2b032MrMimeJuggling = "A2b032MrMimeJuggling"
    A2b035GiratinaExChaoticImpact = "A2b035GiratinaExChaoticImpact"
    A2b044FlamigoDoubleKick = "A2b044FlamigoDoubleKick"
    A3019SteeneeDoubleSpin = "A3019SteeneeDoubleSpin"
    A3020TsareenaThreeKickCombo = "A3020TsareenaThreeKickCombo"
    A3040AlolanVulpixCallForth = "A3040AlolanVulpixCallForth"
    A3041AlolanNinetalesBlizzard = "A3041AlolanNinetalesBlizzard"
    A3043CloysterGuardPress = "A3043CloysterGuardPress"
    A3071SpoinkPsycharge = "A3071SpoinkPsycharge"
    A3116ToxapexSpikeCannon = "A3116ToxapexSpikeCannon"
    A3a003RowletFuryAttack = "A3a003RowletFuryAttack"
    A3a006BuzzwoleExBigBeat = "A3a006BuzzwoleExBigBeat"
    A3a007PheromosaJumpBlues = "A3a007PheromosaJumpBlues"
    A3a019TapuKokoExPlasmaHurricane = "A3a019TapuKokoExPlasmaHurricane"
    A3a043GuzzlordExGrindcore = "A3a043GuzzlordExGrindcore"
    A3a044Poipole2Step = "A3a044Poipole2Step"
    A3a045NagaedelElectroHouse = "A3a045NagaedelElectroHouse"
    A3a047AlolanDugtrioExTripletHeadbutt = "A3a047AlolanDugtrioExTripletHeadbutt"
    A3a053StakatakaBrassRock = "A3a053StakatakaBrassRock"
    A3a060TypeNullQuickBlow = "A3a060TypeNullQuickBlow"
    A3a061SilvallyBraveBuddies = "A3a061SilvallyBraveBuddies"
    A3a062CelesteelaMoombahton = "A3a062CelesteelaMoombahton"
    A3085CosmogTeleport = "A3085CosmogTeleport"
    A3086CosmoemStiffen = "A3086CosmoemStiffen"
    A3122SolgaleoExSolBreaker = "A3122SolgaleoExSolBreaker"
    A3a094JynxPsychic = "A3a094JynxPsychic"
    A3b009FlareonExFireSpin = "A3b009FlareonExFireSpin"
    A3b013IncineroarDarkestLariat = "A3b013IncineroarDarkestLariat"
    A3b020VanilluxeDoubleSpin = "A3b020VanilluxeDoubleSpin"
    A3b053DragoniteExGigaImpact = "A3b053DragoniteExGigaImpact"
    A3b058AipomDoubleHit = "A3b058AipomDoubleHit"
    A4021ShuckleExTripleSlap = "A4021ShuckleExTripleSlap"
    A4026NinetalesScorchingBreath = "A4026NinetalesScorchingBreath"
    A4032MagbyToasty = "A4032MagbyToasty"
    A4066PichuCrackly = "A4066PichuCrackly"
    A4077CleffaTwinkly = "A4077CleffaTwinkly"
    A4102HitmontopPiercingSpin = "A4102HitmontopPiercingSpin"
    A4104PupitarGuardPress = "A4104PupitarGuardPress"
    A4105BinacleDualChop = "A4105BinacleDualChop"
    A4124SkarmoryExSteelWing = "A4124SkarmoryExSteelWing"
    A4134EeveeFindAFriend = "A4134EeveeFindAFriend"
    A4146UrsaringSwingAround = "A4146UrsaringSwingAround"
    A4149LugiaExElementalBlast = "A4149LugiaExElementalBlast"
    A4a020SuicuneExCrystalWaltz = "A4a020SuicuneExCrystalWaltz"
    A4a023MantykeSplashy = "A4a023MantykeSplashy"
    A4a025RaikouExVoltaicBullet = "A4a025RaikouExVoltaicBullet"
    A2053MagnezoneThunderBlast = "A2053MagnezoneThunderBlast"
    PA031CinccinoDoTheWave = "PA031CinccinoDoTheWave"
    PA034PiplupHeal = "PA034PiplupHeal"
    PA052SprigatitoCryForHelp = "PA052SprigatitoCryForHelp"
    PA060ExeggcuteGrowth = "PA060ExeggcuteGrowth"
    PA072AlolanGrimerPoison = "PA072AlolanGrimerPoison"